import logging
import azure.functions as func

from function_app import log_document_changes  # Import the change handler


def get_invocation_logger(context: func.Context) -> logging.LoggerAdapter:
    """Logger tagged with the current invocation."""
    return logging.LoggerAdapter(
        logging.getLogger("CosmosTrigger1"),
        {
            "invocation_id": context.invocation_id,
            "function_name": context.function_name,
        },
    )


def main(documents: func.DocumentList, context: func.Context) -> None:
    """Azure Function Trigger for the Cosmos DB change feed"""
    logger = get_invocation_logger(context)
    logger.info(f"Invocation {context.invocation_id} started")
    log_document_changes(documents, log=logger.info)
