"""
End-to-end tests for the translation pipeline.
"""

import json
from pathlib import Path

import pytest

from lotto_relay.formatter import EntryFormatter
from lotto_relay.pipeline import NAMES_FILE, TERMS_FILE, PipelineResult, TranslationPipeline
from lotto_relay.terminology import TermDictionary


RAW_RESULTS = "Jayamalla 2025-09-10\nGovisetha: Rs.500000 (agro) lakhs\n"


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """A data directory with partially filled dictionaries."""
    (tmp_path / NAMES_FILE).write_text(
        json.dumps({"map": {"Govisetha": "ගොවිසෙත"}}, ensure_ascii=False), encoding="utf-8"
    )
    (tmp_path / TERMS_FILE).write_text(
        json.dumps({"map": {"agro": "කෘෂි"}}, ensure_ascii=False), encoding="utf-8"
    )
    return tmp_path


class TestPipelineResult:

    def test_has_unresolved(self) -> None:
        assert not PipelineResult(message="").has_unresolved
        assert PipelineResult(message="", unresolved_terms=["wonder"]).has_unresolved


class TestTranslate:
    """Test the substitution passes in sequence."""

    def test_passes_applied_in_order(self) -> None:
        pipeline = TranslationPipeline(
            names=TermDictionary({"Govisetha": "ගොවිසෙත"}),
            terms=TermDictionary({"agro": "කෘෂි"}),
        )
        translated = pipeline.translate("Govisetha 4012: Rs.500000 (agro) lakhs\n")
        assert translated == "ගොවිසෙත 4012: Rs.500000 (කෘෂි) ලක්ෂ\n"

    def test_custom_lakhs_replacement(self) -> None:
        pipeline = TranslationPipeline(lakhs_replacement="லட்சம்")
        assert pipeline.translate("5 lakhs") == "5 லட்சம்"


class TestRun:
    """Test full runs through formatting."""

    def test_end_to_end_with_empty_dictionaries(self) -> None:
        """Unknown names and terms are kept and learned."""
        pipeline = TranslationPipeline()
        result = pipeline.run(RAW_RESULTS)

        assert result.message == (
            "\n"
            "📅 **Jayamalla 2025-09-10**\n"
            "\n"
            "**Govisetha**: Rs.500000 (**agro**) ලක්ෂ\n"
            "\n"
        )
        assert result.unresolved_names == ["Govisetha", "Jayamalla"]
        assert result.unresolved_terms == ["agro"]

    def test_end_to_end_with_known_terms(self, data_dir: Path) -> None:
        pipeline = TranslationPipeline.from_directory(data_dir)
        result = pipeline.run(RAW_RESULTS)

        assert result.message == (
            "\n📅 **Jayamalla 2025-09-10**\n\n"
            "**ගොවිසෙත**: Rs.500000 (**කෘෂි**) ලක්ෂ\n\n"
        )
        assert result.unresolved_names == ["Jayamalla"]
        assert result.unresolved_terms == []

    def test_continuation_joins_entry(self) -> None:
        pipeline = TranslationPipeline(names=TermDictionary({"Jayamalla": "ජයමල්ල"}))
        result = pipeline.run("Jayamalla 123: Rs.1000000 lakhs\nbonus line\n")
        assert result.message == "**ජයමල්ල 123**: Rs.1000000 ලක්ෂ bonus line\n\n"

    def test_parenthetical_round_trip(self) -> None:
        """An unknown (word) survives untranslated and is queued for review."""
        pipeline = TranslationPipeline()
        result = pipeline.run("Super Ball: 12\n(wonder) 7\n")
        assert result.message == "**Super Ball**: 12 (wonder) 7\n\n"
        assert result.unresolved_terms == ["wonder"]
        assert pipeline.terms.get("wonder") == "<<<wonder>>>"

    def test_parenthetical_in_entry_rest_is_bolded(self) -> None:
        result = TranslationPipeline().run("Super Ball: 12 (wonder)\n")
        assert result.message == "**Super Ball**: 12 (**wonder**)\n\n"

    def test_repeated_run_learns_once(self) -> None:
        pipeline = TranslationPipeline()
        first = pipeline.run(RAW_RESULTS)
        second = pipeline.run(RAW_RESULTS)

        assert first.message == second.message
        assert len(pipeline.names) == 2
        assert len(pipeline.terms) == 1

    def test_custom_formatter(self) -> None:
        pipeline = TranslationPipeline(formatter=EntryFormatter(emphasize_headers=True))
        result = pipeline.run("Shanida 2025-09-10 (Wednesday)\n")
        assert "(**Wednesday**)" in result.message


class TestPersistence:
    """Test loading and saving the dictionaries around a run."""

    def test_from_directory_missing_files(self, tmp_path: Path) -> None:
        pipeline = TranslationPipeline.from_directory(tmp_path)
        assert len(pipeline.names) == 0
        assert len(pipeline.terms) == 0

    def test_run_does_not_write(self, data_dir: Path) -> None:
        pipeline = TranslationPipeline.from_directory(data_dir)
        pipeline.run(RAW_RESULTS)

        stored = json.loads((data_dir / NAMES_FILE).read_text(encoding="utf-8"))
        assert "Jayamalla" not in stored["map"]

    def test_save_persists_learned_terms(self, data_dir: Path) -> None:
        pipeline = TranslationPipeline.from_directory(data_dir)
        pipeline.run(RAW_RESULTS + "Kapruka: 1 (bonus)\n")

        assert pipeline.save() is True

        names = json.loads((data_dir / NAMES_FILE).read_text(encoding="utf-8"))["map"]
        terms = json.loads((data_dir / TERMS_FILE).read_text(encoding="utf-8"))["map"]
        assert names == {
            "Govisetha": "ගොවිසෙත",
            "Jayamalla": "<<<Jayamalla>>>",
            "Kapruka": "<<<Kapruka>>>",
        }
        assert terms == {"agro": "කෘෂි", "bonus": "<<<bonus>>>"}

    def test_converges_after_translation_added(self, data_dir: Path) -> None:
        """Once an operator fills in a placeholder, the next run uses it."""
        pipeline = TranslationPipeline.from_directory(data_dir)
        pipeline.run(RAW_RESULTS)
        pipeline.save()

        path = data_dir / NAMES_FILE
        stored = json.loads(path.read_text(encoding="utf-8"))
        stored["map"]["Jayamalla"] = "ජයමල්ල"
        path.write_text(json.dumps(stored, ensure_ascii=False), encoding="utf-8")

        result = TranslationPipeline.from_directory(data_dir).run(RAW_RESULTS)
        assert "📅 **ජයමල්ල 2025-09-10**" in result.message
        assert result.unresolved_names == []

    def test_save_without_paths(self) -> None:
        assert TranslationPipeline().save() is True

    def test_save_failure_reported(self, tmp_path: Path) -> None:
        (tmp_path / NAMES_FILE).mkdir()
        pipeline = TranslationPipeline.from_directory(tmp_path)
        assert pipeline.save() is False
        assert (tmp_path / TERMS_FILE).exists()
