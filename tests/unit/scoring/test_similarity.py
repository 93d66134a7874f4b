"""Tests for word-set similarity."""


class TestWordSet:
    """Test word_set tokenization."""

    def test_lowercases_and_drops_stop_words(self):
        """Stop words and punctuation are removed."""
        from resumefit.scoring.similarity import word_set

        assert word_set("The Python and the API, for teams!") == {"python", "api", "teams"}

    def test_keeps_digits_and_underscores(self):
        """Word characters include digits and underscores."""
        from resumefit.scoring.similarity import word_set

        assert word_set("node_js 2024") == {"node_js", "2024"}

    def test_stemming_merges_inflections(self):
        """With stemming on, inflected forms share a stem."""
        from resumefit.scoring.similarity import word_set

        assert word_set("developing developed", stem=True) == {"develop"}
        assert len(word_set("developing developed")) == 2


class TestJaccardSimilarity:
    """Test jaccard_similarity."""

    def test_partial_overlap(self):
        """Intersection over union."""
        from resumefit.scoring.similarity import jaccard_similarity

        assert jaccard_similarity({"a", "b", "c"}, {"b", "c", "d"}) == 0.5

    def test_empty_sets(self):
        """Two empty sets have zero similarity."""
        from resumefit.scoring.similarity import jaccard_similarity

        assert jaccard_similarity(set(), set()) == 0.0


class TestTextSimilarity:
    """Test text_similarity."""

    def test_identical_texts_score_100(self):
        """Identical content words give full similarity."""
        from resumefit.scoring.similarity import text_similarity

        assert text_similarity("Python developer", "python DEVELOPER") == 100.0

    def test_disjoint_texts_score_0(self):
        """No shared content words gives zero."""
        from resumefit.scoring.similarity import text_similarity

        assert text_similarity("Python developer", "Java designer") == 0.0

    def test_stop_word_only_texts_score_0(self):
        """Texts made only of stop words have nothing to compare."""
        from resumefit.scoring.similarity import text_similarity

        assert text_similarity("the and of", "a an the") == 0.0

    def test_stemming_raises_overlap(self):
        """Stemming lets inflected forms match."""
        from resumefit.scoring.similarity import text_similarity

        plain = text_similarity("developing services", "developed service")
        stemmed = text_similarity("developing services", "developed service", stem=True)

        assert plain == 0.0
        assert stemmed == 100.0
