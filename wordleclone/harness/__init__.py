from .core import run_case, run_batch, summarize
from .io import write_csv, write_manifest, timestamp_id
from .strategies import create_strategy, get_strategy_ids

__all__ = [
    "run_case", "run_batch", "summarize",
    "write_csv", "write_manifest", "timestamp_id",
    "create_strategy", "get_strategy_ids",
]
