"""CLI エントリーポイント"""

import sys
import logging
import os
from pathlib import Path

from .orchestration.assessment_service import AssessmentService
from .infrastructure.record_loader import RecordLoader
from .infrastructure.output_writer import OutputWriter


# DINO_INPUT_PATH 未指定時に使用するサンプルデータ
SAMPLE_RECORDS = [
    {"name": "DinoA", "category": "herbivore", "period": "Cretaceous", "diet": "plants", "age": 100},
    {"name": "DinoB", "category": "carnivore", "period": "Jurassic", "diet": "meat", "age": 80},
]


def main():
    """
    CLI エントリーポイント

    Usage:
        python -m src.dino_assessor

    Environment:
        DINO_INPUT_PATH: 入力 JSON ファイル (未指定時は SAMPLE_RECORDS)
        DINO_OUTPUT_PATH: 出力 JSON ファイル (未指定時は標準出力)
        LOG_LEVEL: ログレベル (既定: INFO)

    Exit codes:
        0: 成功
        1: 失敗
    """
    # ロギング設定 (標準エラー出力)
    log_level_name = os.environ.get("LOG_LEVEL", "INFO").strip().upper()
    log_level = logging.getLevelName(log_level_name)
    # 未知のレベル名は getLevelName が "Level XXX" 文字列を返す
    unknown_level = not isinstance(log_level, int)
    if unknown_level:
        log_level = logging.INFO

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    logger = logging.getLogger(__name__)

    if unknown_level:
        logger.warning(f"Unknown LOG_LEVEL '{log_level_name}', falling back to INFO")

    try:
        input_path = os.environ.get("DINO_INPUT_PATH", "")
        output_path = os.environ.get("DINO_OUTPUT_PATH", "")

        if input_path:
            raw_records = RecordLoader(Path(input_path)).load_records()
        else:
            logger.info("DINO_INPUT_PATH not set, using sample records")
            raw_records = SAMPLE_RECORDS

        service = AssessmentService()
        result = service.assess(raw_records)

        output_writer = OutputWriter(Path(output_path) if output_path else None)
        written = output_writer.write_output(result)
        if written:
            logger.info(f"Assessment written to {written}")

        sys.exit(0)

    except Exception as e:
        logger.error(f"Assessment failed: {str(e)}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
