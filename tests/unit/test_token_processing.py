"""Unit tests for text tokenization."""

import pytest

from vitae.utils.token_processing import STOPWORDS, Tokenizer, tokenize, unique


@pytest.mark.unit
def test_tokenize_lowercases_and_drops_stopwords():
    """Test basic pipeline on a typical bullet."""
    assert tokenize("Built weekly KPI tracker using SQL") == ["built", "weekly", "kpi", "tracker", "sql"]


@pytest.mark.unit
def test_tokenize_keeps_plus_hash_and_dot():
    """Test that c++, c# and node.js survive as single tokens."""
    assert tokenize("C++ and C# with Node.js") == ["c++", "c#", "node.js"]


@pytest.mark.unit
def test_tokenize_keeps_trailing_period():
    """Test that sentence punctuation stays attached (no stemming or cleanup)."""
    assert tokenize("Skills in Operations.") == ["in", "operations."]


@pytest.mark.unit
def test_tokenize_drops_short_tokens():
    """Test minimum token length of 2."""
    assert tokenize("a b cd / x") == ["cd"]


@pytest.mark.unit
@pytest.mark.parametrize("text", ["", "   ", "\n\t"])
def test_tokenize_empty_input(text):
    """Test that blank input yields no tokens."""
    assert tokenize(text) == []


@pytest.mark.unit
def test_tokenize_keeps_duplicates():
    """Test that duplicates are preserved in order."""
    assert tokenize("SQL reporting, sql dashboards") == ["sql", "reporting", "sql", "dashboards"]


@pytest.mark.unit
def test_tokenize_is_idempotent():
    """Test that re-tokenizing joined tokens gives the same tokens."""
    text = "Partnered with product & operations leads (Q3) on C++/Node.js rollout."
    once = tokenize(text)
    assert tokenize(" ".join(once)) == once


@pytest.mark.unit
def test_stopwords_cover_job_posting_filler():
    """Test that domain-generic posting words are stopwords."""
    for word in ("experience", "responsibilities", "candidate", "skills", "teams"):
        assert word in STOPWORDS
    assert tokenize("Experience and responsibilities") == []


@pytest.mark.unit
def test_unique_preserves_first_seen_order():
    """Test order-preserving deduplication."""
    assert unique(["sql", "excel", "sql", "python", "excel"]) == ["sql", "excel", "python"]
    assert unique([]) == []


@pytest.mark.unit
def test_tokenizer_custom_stopwords_replace_defaults():
    """Test that custom stopwords replace the default set."""
    tokenizer = Tokenizer(custom_stopwords={"intern"})
    assert tokenizer("Operations intern with SQL") == ["operations", "with", "sql"]


@pytest.mark.unit
def test_tokenizer_without_stopwords_and_longer_minimum():
    """Test disabling stopwords and raising the length floor."""
    tokenizer = Tokenizer(use_stopwords=False, min_token_length=3)
    assert tokenizer.tokenize("The BI team uses SQL") == ["the", "team", "uses", "sql"]
    assert tokenizer.get_config_dict() == {
        "use_stopwords": False,
        "stopword_count": 0,
        "min_token_length": 3,
    }
