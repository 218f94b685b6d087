"""hashviz: hash-table simulation engine for the hashing visualizer."""

from .errors import InvalidArgument
from .hashing import (
    HASH_FUNCTIONS,
    CustomHashFunction,
    HashFunction,
    HashFunctionId,
    bucket_loads,
    compare_hash_functions,
    describe_hash_function,
    distribution_summary,
    resolve_hash_function,
)
from .probing import ProbeSequence, ResolutionStrategy, probe_sequence
from .metrics import Analytics, compute_analytics
from .table import (
    OperationLog,
    OperationResult,
    Reason,
    TableStore,
    create_store,
    from_document,
    load_session,
    save_session,
    to_document,
)
from .config import EngineConfig, clamp_table_size, load_config, load_engine_config
from .utils import Timer, get_logger, seed_everything

__version__ = "0.1.0"

__all__ = [
    # Table
    "TableStore",
    "create_store",
    "OperationResult",
    "Reason",
    "OperationLog",
    # Hashing
    "HashFunction",
    "HashFunctionId",
    "CustomHashFunction",
    "HASH_FUNCTIONS",
    "resolve_hash_function",
    "describe_hash_function",
    # Probing
    "ResolutionStrategy",
    "ProbeSequence",
    "probe_sequence",
    # Analytics
    "Analytics",
    "compute_analytics",
    # Diagnostics
    "bucket_loads",
    "distribution_summary",
    "compare_hash_functions",
    # Sessions
    "to_document",
    "from_document",
    "save_session",
    "load_session",
    # Config
    "EngineConfig",
    "load_config",
    "load_engine_config",
    "clamp_table_size",
    # Errors
    "InvalidArgument",
    # Utils
    "get_logger",
    "seed_everything",
    "Timer",
]
