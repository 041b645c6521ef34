"""
DynamoDB utility functions for data access.
"""
import os
from typing import Dict, List, Any
import boto3

# Singleton instance
_dynamo_instance = None

def get_dynamo() -> 'DynamoDBClient':
    """
    Get or create singleton DynamoDB client instance.
    
    This is the only way services should reach DynamoDB. The table name is
    read from the INSIGHTS_TABLE_NAME environment variable on first use.
    
    Example:
        dynamo = get_dynamo()
        dynamo.put_item({"PK": create_pk("123"), "SK": "PROFILE"})
    
    Returns:
        DynamoDBClient: Singleton instance of DynamoDB client
        
    Raises:
        EnvironmentError: If INSIGHTS_TABLE_NAME environment variable is not set
    """
    global _dynamo_instance
    if _dynamo_instance is None:
        try:
            table_name = os.environ['INSIGHTS_TABLE_NAME']
        except KeyError:
            raise EnvironmentError(
                "INSIGHTS_TABLE_NAME environment variable not set. "
                "This variable must be set to the DynamoDB table name."
            )
        _dynamo_instance = DynamoDBClient(table_name)
    return _dynamo_instance

class DynamoDBClient:
    """Client for interacting with DynamoDB table."""
    
    def __init__(self, table_name: str):
        self.dynamodb = boto3.resource('dynamodb')
        self.table = self.dynamodb.Table(table_name)
    
    def put_item(self, item: Dict[str, Any]) -> Dict[str, Any]:
        """
        Put a single item into the table.
        
        Args:
            item: Dictionary containing item attributes
            
        Returns:
            Response from DynamoDB
        """
        return self.table.put_item(Item=item)
    
    def batch_put_items(self, items: List[Dict[str, Any]]) -> None:
        """
        Put several items using a batch writer.
        
        The batch writer groups requests and resends unprocessed items.
        
        Args:
            items: Items to write
        """
        with self.table.batch_writer() as batch:
            for item in items:
                batch.put_item(Item=item)

def create_pk(user_id: str) -> str:
    """Create partition key from user ID."""
    return f"USER#{user_id}"

def create_recommendation_sk(timestamp: str, recommendation_id: str) -> str:
    """
    Create sort key for a stored recommendation.
    
    Args:
        timestamp: ISO format generation time shared by one batch
        recommendation_id: Stable rule identifier of the recommendation
        
    Returns:
        Sort key in format "REC#{timestamp}#{recommendation_id}"
    """
    return f"REC#{timestamp}#{recommendation_id}"

def create_conversation_sk(timestamp: str) -> str:
    """Create sort key for a chat log entry."""
    return f"CHAT#{timestamp}"
