"""OutputWriter のユニットテスト"""

import io
import json
import pytest
from src.dino_assessor.infrastructure.output_writer import OutputWriter
from src.dino_assessor.orchestration.assessment_service import AssessmentService


class TestOutputWriter:
    """OutputWriter のテストケース"""

    @pytest.fixture
    def sample_result(self):
        """サンプル AssessmentResult を作成"""
        return AssessmentService().assess([
            {"name": "DinoA", "category": "herbivore", "period": "Cretaceous", "diet": "plants", "age": 100},
            {"name": "DinoB", "category": "carnivore", "period": "Jurassic", "diet": "meat", "age": 80},
        ])

    def test_write_output_to_file(self, tmp_path, sample_result):
        """ファイルに JSON が書き込まれることを確認"""
        output_file = tmp_path / "output" / "assessment.json"
        writer = OutputWriter(output_file)

        written = writer.write_output(sample_result)

        assert written == output_file
        assert output_file.exists()

    def test_write_output_creates_directory(self, tmp_path, sample_result):
        """出力ディレクトリが自動作成されることを確認"""
        output_file = tmp_path / "nested" / "dir" / "assessment.json"

        OutputWriter(output_file).write_output(sample_result)

        assert output_file.parent.is_dir()

    def test_write_output_structure(self, tmp_path, sample_result):
        """出力 JSON の構造を確認"""
        output_file = tmp_path / "assessment.json"
        OutputWriter(output_file).write_output(sample_result)

        with open(output_file, "r", encoding="utf-8") as f:
            data = json.load(f)

        assert set(data) == {"records", "summary"}
        assert data["summary"] == {"herbivore": 1, "carnivore": 1}
        assert data["records"][1] == {
            "name": "DinoB",
            "category": "carnivore",
            "period": "Jurassic",
            "diet": "meat",
            "age": 80,
            "health": 20,
            "status": "Alive",
            "age_metric": 40,
        }

    def test_write_output_to_stream(self, sample_result):
        """ストリームに書き込む場合は None を返すことを確認"""
        stream = io.StringIO()

        written = OutputWriter(stream=stream).write_output(sample_result)

        assert written is None
        data = json.loads(stream.getvalue())
        assert data["records"][0]["status"] == "Dead"

    def test_write_output_defaults_to_stdout(self, sample_result, capsys):
        """出力先未指定時は標準出力に書き込むことを確認"""
        OutputWriter().write_output(sample_result)

        captured = capsys.readouterr()
        assert json.loads(captured.out)["summary"]["carnivore"] == 1

    def test_write_output_empty_result(self):
        """空の結果も出力できることを確認"""
        stream = io.StringIO()

        OutputWriter(stream=stream).write_output(AssessmentService().assess(None))

        assert json.loads(stream.getvalue()) == {"records": [], "summary": {}}
