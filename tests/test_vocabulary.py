"""
詞彙索引測試
"""

from pinyinmatch import PracticeEntry, VocabularyIndex
from pinyinmatch.practice.vocabulary import DuplicateInfo, Segment


class TestVocabularyIndex:
    """測試詞彙索引"""

    def setup_method(self):
        self.v1 = PracticeEntry(id="v1", pinyin="nǐ hǎo", english="hello")
        self.v2 = PracticeEntry(id="v2", pinyin="xièxie", english="thanks")
        self.v3 = PracticeEntry(id="v3", pinyin="Nǐhǎo", english="hello (dup)")
        self.v4 = PracticeEntry(id="v4", pinyin="...", english="placeholder")
        self.index = VocabularyIndex([self.v1, self.v2, self.v3, self.v4])

    def test_word_set(self):
        assert self.index.words == frozenset({"ni", "hao", "xiexie", "nihao"})

    def test_contains(self):
        assert "Hǎo" in self.index
        assert "xiexie!" in self.index
        assert "lv" not in self.index
        assert "" not in self.index
        assert 5 not in self.index

    def test_highlight_segments(self):
        segments = self.index.highlight_segments("Nǐ hǎo, lǎoshī!")
        assert segments == [
            Segment("Nǐ", False),
            Segment(" ", False),
            Segment("hǎo,", False),
            Segment(" ", False),
            Segment("lǎoshī!", True),
        ]

    def test_highlight_keeps_whitespace_runs(self):
        segments = self.index.highlight_segments("  ... zàijiàn")
        assert segments == [
            Segment("  ", False),
            Segment("...", False),
            Segment(" ", False),
            Segment("zàijiàn", True),
        ]

    def test_sentence_matches(self):
        s1 = PracticeEntry(id="s1", pinyin="Nǐ hǎo ma?")
        s2 = PracticeEntry(id="s2", pinyin="Xièxie nǐ!")
        s3 = PracticeEntry(id="s3", pinyin="Zàijiàn")
        matches = self.index.sentence_matches([s1, s2, s3])
        assert matches == {"v1": [s1, s2], "v2": [s2]}

    def test_duplicate_groups(self):
        assert self.index.duplicate_groups() == {"nihao": [self.v1, self.v3]}

    def test_duplicates_of(self):
        info = self.index.duplicates_of("v1")
        assert info == DuplicateInfo(normalized_key="nihao", others=[self.v3])
        assert self.index.duplicates_of("v3").others == [self.v1]
        assert self.index.duplicates_of("v2") is None
        assert self.index.duplicates_of("missing") is None

    def test_duplicate_map(self):
        assert set(self.index.duplicate_map()) == {"v1", "v3"}

    def test_empty_index(self):
        index = VocabularyIndex([])
        assert index.words == frozenset()
        assert index.highlight_segments("ni") == [Segment("ni", True)]
        assert index.sentence_matches([PracticeEntry(id="s", pinyin="ni")]) == {}
        assert index.duplicate_groups() == {}
        assert index.duplicate_map() == {}
