"""
インフラストラクチャ層

ファイル入出力などの外部システム依存を提供します。
"""

from .record_loader import RecordLoader, RecordLoadError
from .output_writer import OutputWriter

__all__ = ["RecordLoader", "RecordLoadError", "OutputWriter"]
