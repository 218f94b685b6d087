"""Table state, operation traces and session persistence."""

from hashviz.table.log import OperationLog
from hashviz.table.store import OperationResult, Reason, TableStore, create_store
from hashviz.table.session import from_document, load_session, save_session, to_document

__all__ = [
    "TableStore",
    "create_store",
    "OperationResult",
    "Reason",
    "OperationLog",
    "to_document",
    "from_document",
    "save_session",
    "load_session",
]
