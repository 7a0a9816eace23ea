from .session import Session, Outcome
from .core import run_case, run_batch
from .io import write_csv, write_manifest, summarize, pretty_summary

__all__ = ["Session", "Outcome", "run_case", "run_batch", "write_csv", "write_manifest",
           "summarize", "pretty_summary"]
