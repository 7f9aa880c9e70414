"""Unit tests for moodmatch_recommendation_service.ml.text_processor."""
import pandas as pd

from moodmatch_recommendation_service.ml.text_processor import (
    STOPWORDS,
    clean_html,
    combine_text_features,
    stem,
    tokenize
)


class TestCleanHtml:
    """Tests for clean_html function."""

    def test_clean_html_with_tags(self):
        """Test cleaning HTML tags from text."""
        # Arrange
        text = "<p>This is <b>bold</b> text with <a href='link'>links</a>.</p>"
        expected = "This is bold text with links."

        # Act
        result = clean_html(text)

        # Assert
        assert result == expected

    def test_clean_html_with_none(self):
        """Test clean_html with None input."""
        # Act
        result = clean_html(None)

        # Assert
        assert result == ""

    def test_clean_html_with_nan(self):
        """Test clean_html with NaN input."""
        # Act
        result = clean_html(pd.NA)

        # Assert
        assert result == ""

    def test_clean_html_with_extra_whitespace(self):
        """Test collapsing extra whitespace."""
        # Act
        result = clean_html("<p>Text   with    extra     spaces</p>")

        # Assert
        assert result == "Text with extra spaces"


class TestStem:
    """Tests for stem function."""

    def test_stem_strips_known_suffixes(self):
        """Test each suffix is removed."""
        # Assert
        assert stem("running") == "runn"
        assert stem("jumped") == "jump"
        assert stem("quickly") == "quick"
        assert stem("kindness") == "kind"

    def test_stem_first_matching_suffix_wins(self):
        """Test suffixes are checked in order, -tion before -ness."""
        # Assert
        assert stem("action") == "ac"

    def test_stem_leaves_other_words(self):
        """Test words without a known suffix are unchanged."""
        # Assert
        assert stem("space") == "space"


class TestTokenize:
    """Tests for tokenize function."""

    def test_tokenize_basic(self):
        """Test lowercasing, stopword removal and stemming."""
        # Act
        tokens = tokenize("The Running dogs jumped quickly!")

        # Assert
        assert tokens == ["runn", "dogs", "jump", "quick"]

    def test_tokenize_drops_short_words(self):
        """Test tokens of two characters or fewer are dropped."""
        # Act
        tokens = tokenize("an ox is big")

        # Assert
        assert tokens == ["big"]

    def test_tokenize_punctuation_splits_words(self):
        """Test punctuation becomes whitespace."""
        # Act
        tokens = tokenize("dream-sharing technology")

        # Assert
        assert tokens == ["dream", "shar", "technology"]

    def test_tokenize_keeps_angle_bracket_text(self):
        """Test text between angle brackets is tokenized, not dropped as markup."""
        # Act
        tokens = tokenize("price<value than>cost")

        # Assert
        assert tokens == ["price", "value", "than", "cost"]

    def test_tokenize_empty(self):
        """Test empty and None input."""
        # Assert
        assert tokenize("") == []
        assert tokenize(None) == []

    def test_tokenize_never_returns_stopwords(self):
        """Test no stopword survives tokenization."""
        # Act
        tokens = tokenize(" ".join(sorted(STOPWORDS)))

        # Assert
        assert tokens == []


class TestCombineTextFeatures:
    """Tests for combine_text_features function."""

    def test_combine_fields_then_description(self):
        """Test fields come first and empty fields are skipped."""
        # Act
        result = combine_text_features("<p>A story.</p>", ["Drama", None, "Crime"])

        # Assert
        assert result == "Drama Crime A story."

    def test_combine_without_fields(self):
        """Test description only."""
        # Act
        result = combine_text_features("Just text")

        # Assert
        assert result == "Just text"

    def test_combine_all_empty(self):
        """Test everything empty gives an empty string."""
        # Act
        result = combine_text_features(None, [None, ""])

        # Assert
        assert result == ""
