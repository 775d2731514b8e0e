"""Tests for the YAML pattern repository."""
import pytest

from pattern_catalog.domain.pattern import PatternCategory, PatternValidationError
from pattern_catalog.infrastructure.exceptions import StorageError
from pattern_catalog.infrastructure.persistence import YamlPatternRepository


class TestYamlPatternRepository:
    """Test loading catalogue entries from a data directory."""

    def test_loads_entries(self, tmp_path, pattern_writer):
        """Test that every entry file is loaded."""
        pattern_writer(tmp_path, "singleton")
        pattern_writer(tmp_path, "adapter", category="structural")
        repository = YamlPatternRepository(tmp_path)

        assert sorted(p.slug for p in repository.find_all()) == ["adapter", "singleton"]
        assert repository.find_by_slug("adapter").category == PatternCategory.STRUCTURAL
        assert repository.find_by_slug("missing") is None
        assert repository.exists("singleton")
        assert [p.slug for p in repository.find_by_category("structural")] == ["adapter"]

    def test_metadata(self, tmp_path, pattern_writer):
        """Test reading catalog.yaml."""
        pattern_writer(tmp_path, "singleton")
        (tmp_path / "catalog.yaml").write_text(
            "title: My Patterns\nintroduction: |\n  Hello.\ncategories:\n  creational: Making things.\n")
        metadata = YamlPatternRepository(tmp_path).get_catalog_metadata()
        assert metadata == {
            "title": "My Patterns",
            "introduction": "Hello.",
            "categories": {"creational": "Making things."},
        }

    def test_metadata_is_optional(self, tmp_path, pattern_writer):
        """Test that a missing catalog.yaml gives empty metadata."""
        pattern_writer(tmp_path, "singleton")
        metadata = YamlPatternRepository(tmp_path).get_catalog_metadata()
        assert metadata == {"title": None, "introduction": "", "categories": {}}

    def test_categories_must_be_mapping(self, tmp_path):
        """Test that category descriptions must be a mapping."""
        (tmp_path / "catalog.yaml").write_text("categories:\n  - creational\n")
        with pytest.raises(StorageError, match="must be a mapping"):
            YamlPatternRepository(tmp_path).get_catalog_metadata()

    def test_missing_patterns_directory(self, tmp_path):
        """Test that a data directory without patterns is a storage error."""
        with pytest.raises(StorageError, match="Pattern directory not found"):
            YamlPatternRepository(tmp_path).find_all()

    def test_invalid_entry_names_file(self, tmp_path, pattern_writer):
        """Test that validation errors name the offending file and field."""
        path = pattern_writer(tmp_path, "singleton", advantages=[])
        with pytest.raises(PatternValidationError) as exc_info:
            YamlPatternRepository(tmp_path).find_all()
        assert exc_info.value.source == str(path)
        assert exc_info.value.slug == "singleton"
        assert "advantages" in exc_info.value.message

    def test_duplicate_slug(self, tmp_path, pattern_writer):
        """Test that two files with the same slug are rejected."""
        pattern_writer(tmp_path, "singleton")
        (tmp_path / "patterns" / "zz-copy.yaml").write_text(
            (tmp_path / "patterns" / "singleton.yaml").read_text())
        with pytest.raises(PatternValidationError, match="duplicate slug 'singleton'"):
            YamlPatternRepository(tmp_path).find_all()

    def test_invalid_yaml(self, tmp_path, pattern_writer):
        """Test that malformed YAML is a storage error."""
        pattern_writer(tmp_path, "singleton")
        (tmp_path / "patterns" / "broken.yaml").write_text("slug: [unclosed\n")
        with pytest.raises(StorageError, match="Invalid YAML"):
            YamlPatternRepository(tmp_path).find_all()

    def test_non_mapping_entry(self, tmp_path):
        """Test that an entry file must hold a mapping."""
        (tmp_path / "patterns").mkdir()
        (tmp_path / "patterns" / "list.yaml").write_text("- singleton\n")
        with pytest.raises(StorageError, match="must contain a mapping"):
            YamlPatternRepository(tmp_path).find_all()

    def test_cache_and_reload(self, tmp_path, pattern_writer):
        """Test that entries are cached until reload()."""
        pattern_writer(tmp_path, "singleton")
        repository = YamlPatternRepository(tmp_path)
        assert len(repository.find_all()) == 1

        pattern_writer(tmp_path, "builder")
        assert len(repository.find_all()) == 1
        repository.reload()
        assert len(repository.find_all()) == 2


class TestPackagedCatalogue:
    """Test the catalogue data shipped with the package."""

    def test_all_entries_load(self, repository):
        """Test that the packaged data validates."""
        patterns = repository.find_all()
        assert len(patterns) == 23
        assert sum(1 for p in patterns if p.is_stub) == 4

    def test_every_category_present(self, repository):
        """Test that all three categories have entries."""
        for category in PatternCategory:
            assert repository.find_by_category(category)

    def test_orders_unique_per_category(self, repository):
        """Test that no two entries of a category share an order."""
        for category in PatternCategory:
            orders = [p.order for p in repository.find_by_category(category)]
            assert len(orders) == len(set(orders))

    def test_metadata(self, repository):
        """Test that every category has a description."""
        metadata = repository.get_catalog_metadata()
        assert metadata["title"] == "Design Patterns"
        assert set(metadata["categories"]) == {c.value for c in PatternCategory}
