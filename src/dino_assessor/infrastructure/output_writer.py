"""JSON 出力コンポーネント"""

from typing import Any, Dict, Optional, TextIO
from pathlib import Path
import json
import sys

from ..domain.models import AssessmentResult


class OutputWriter:
    """
    アセスメント結果を JSON として出力

    Responsibilities:
    - AssessmentResult を JSON に変換 (status は "Alive" / "Dead" の文字列)
    - ファイルまたはストリーム (既定は標準出力) への書き込み
    - 出力先ディレクトリ管理
    """

    def __init__(self, output_path: Optional[Path] = None, stream: Optional[TextIO] = None):
        """
        OutputWriter を初期化

        Args:
            output_path: 出力ファイルパス。None の場合はストリームに書き込む
            stream: 書き込み先ストリーム。None の場合は sys.stdout
        """
        self.output_path = Path(output_path) if output_path else None
        self.stream = stream

    def write_output(self, result: AssessmentResult) -> Optional[Path]:
        """
        アセスメント結果を書き込み

        Args:
            result: アセスメント結果

        Returns:
            Optional[Path]: ファイル出力時はそのパス、ストリーム出力時は None
        """
        output_data = self.to_json_dict(result)

        if self.output_path is None:
            stream = self.stream or sys.stdout
            json.dump(output_data, stream, ensure_ascii=False, indent=2)
            stream.write("\n")
            return None

        # ディレクトリ自動作成
        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.output_path, "w", encoding="utf-8") as f:
            json.dump(output_data, f, ensure_ascii=False, indent=2)

        return self.output_path

    @staticmethod
    def to_json_dict(result: AssessmentResult) -> Dict[str, Any]:
        """AssessmentResult を JSON 互換の dict に変換"""
        return result.model_dump(mode="json")
