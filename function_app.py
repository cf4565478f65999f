import os
import json
import logging
import azure.functions as func
from collections.abc import Mapping
from datetime import datetime, date

app = func.FunctionApp()

# ---- Helper functions ----

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off"}


def env_flag(name: str, default: bool) -> bool:
    """Read a boolean app setting, falling back to ``default``."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    logging.warning(f"Unrecognized value {raw!r} for {name}; using {default}")
    return default


def json_converter(o):
    """Convert non-serializable types to a string."""
    if isinstance(o, (datetime, date)):
        return o.isoformat()
    return str(o)


def serialize_document(doc) -> str:
    """Return the JSON form of a change feed document."""
    if isinstance(doc, Mapping):
        doc = dict(doc)
    return json.dumps(doc, default=json_converter)


def log_document_changes(documents, log=logging.info) -> None:
    """Log the size of a change batch and a summary line per document.

    ``log`` is any callable taking a message string. Errors raised while
    serializing or logging are left for the Functions host to retry.
    """
    documents = documents or []
    log(f"Cosmos DB function processed {len(documents)} documents")

    if not documents:
        log("No documents found.")
        return

    for doc in documents:
        log(f"Document: {serialize_document(doc)}")
        if isinstance(doc, Mapping) and "id" in doc:
            log(f"Document id: {doc['id']}")


# ---------------------------
# Change feed trigger
# ---------------------------
COSMOS_CONNECTION = "COSMOS_CONNECTION"
COSMOS_DATABASE_NAME = os.getenv("COSMOS_DATABASE_NAME", "documents-db")
COSMOS_CONTAINER_NAME = os.getenv("COSMOS_CONTAINER_NAME", "documents")
COSMOS_LEASE_CONTAINER_NAME = os.getenv("COSMOS_LEASE_CONTAINER_NAME", "leases")
CREATE_LEASE_CONTAINER = env_flag("COSMOS_CREATE_LEASE_CONTAINER", True)


@app.function_name(name="cosmos_trigger")
@app.cosmos_db_trigger(
    arg_name="documents",
    connection=COSMOS_CONNECTION,  # app setting name, not the secret itself
    database_name=COSMOS_DATABASE_NAME,
    container_name=COSMOS_CONTAINER_NAME,
    lease_container_name=COSMOS_LEASE_CONTAINER_NAME,
    create_lease_container_if_not_exists=CREATE_LEASE_CONTAINER,
)
def cosmos_trigger(documents: func.DocumentList) -> None:
    """Change feed trigger for the monitored container."""
    log_document_changes(documents)
