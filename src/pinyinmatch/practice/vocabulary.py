"""
詞彙索引 (Vocabulary Index)

以 normalize_pinyin_word 建立課程詞彙的單詞集合，用於:
- 標示句子中「不在詞彙表」的拼音詞
- 找出含有某詞彙的例句
- 找出拼音重複的詞彙 (整組或逐筆查詢)

使用方式:
    from pinyinmatch import PracticeEntry, VocabularyIndex

    index = VocabularyIndex([
        PracticeEntry(id="v1", pinyin="nǐ hǎo", english="hello"),
        PracticeEntry(id="v2", pinyin="xièxie", english="thanks"),
    ])
    index.highlight_segments("Nǐ hǎo, lǎoshī!")
    # [Segment('Nǐ', False), Segment(' ', False), Segment('hǎo,', False),
    #  Segment(' ', False), Segment('lǎoshī!', True)]
"""

import re
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, List, Optional

from pinyinmatch.core.normalizer import normalize_pinyin_word, tokenize_pinyin_words
from pinyinmatch.utils.logger import get_logger

_WHITESPACE_SPLIT = re.compile(r"(\s+)")


@dataclass(frozen=True)
class PracticeEntry:
    """詞彙或例句"""

    id: str
    pinyin: str
    english: str = ""


@dataclass(frozen=True)
class DuplicateInfo:
    """某筆詞彙的重複資訊；others 為拼音相同的其他詞彙 (保持輸入順序)"""

    normalized_key: str
    others: List[PracticeEntry]


@dataclass(frozen=True)
class Segment:
    """拼音片段；highlight 為 True 表示此詞不在詞彙表中"""

    text: str
    highlight: bool


class VocabularyIndex:
    """
    課程詞彙索引

    建立後不可變更，詞彙列表更新時請重新建立。
    """

    def __init__(self, entries: Iterable[PracticeEntry]):
        self._entries: List[PracticeEntry] = list(entries)
        self._logger = get_logger("practice.vocabulary")

        words = set()
        for entry in self._entries:
            words.update(tokenize_pinyin_words(entry.pinyin))
        self._words: FrozenSet[str] = frozenset(words)

        self._logger.debug(f"VocabularyIndex built: {len(self._entries)} entries, {len(self._words)} words")

    @property
    def entries(self) -> List[PracticeEntry]:
        return list(self._entries)

    @property
    def words(self) -> FrozenSet[str]:
        return self._words

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        normalized = normalize_pinyin_word(word)
        return bool(normalized) and normalized in self._words

    def highlight_segments(self, pinyin: str) -> List[Segment]:
        """
        切分拼音並標示不在詞彙表的詞

        空白片段與正規化後為空的片段 (純標點等) 不標示。
        """
        segments: List[Segment] = []
        for text in _WHITESPACE_SPLIT.split(pinyin):
            if not text:
                continue
            if not text.strip():
                segments.append(Segment(text, False))
                continue
            normalized = normalize_pinyin_word(text)
            if not normalized:
                segments.append(Segment(text, False))
                continue
            segments.append(Segment(text, normalized not in self._words))
        return segments

    def sentence_matches(self, sentences: Iterable[PracticeEntry]) -> Dict[str, List[PracticeEntry]]:
        """
        詞彙 id → 與該詞彙共用任一拼音詞的例句 (保持輸入順序)

        沒有對應例句的詞彙不會出現在結果中。
        """
        sentence_list = list(sentences)
        sentence_tokens = [set(tokenize_pinyin_words(s.pinyin)) for s in sentence_list]

        matches: Dict[str, List[PracticeEntry]] = {}
        for vocab in self._entries:
            vocab_tokens = set(tokenize_pinyin_words(vocab.pinyin))
            if not vocab_tokens:
                continue
            matched = [
                sentence
                for sentence, tokens in zip(sentence_list, sentence_tokens)
                if tokens & vocab_tokens
            ]
            if matched:
                matches[vocab.id] = matched
        return matches

    def duplicate_groups(self) -> Dict[str, List[PracticeEntry]]:
        """
        正規化拼音 → 拼音重複的詞彙 (兩筆以上才列出)

        以整個 pinyin 欄位做單詞正規化，因此 "nǐ hǎo" 與 "nihao" 視為重複。
        """
        groups: Dict[str, List[PracticeEntry]] = {}
        for entry in self._entries:
            key = normalize_pinyin_word(entry.pinyin)
            if not key:
                continue
            groups.setdefault(key, []).append(entry)
        return {key: group for key, group in groups.items() if len(group) > 1}

    def duplicate_map(self) -> Dict[str, DuplicateInfo]:
        """詞彙 id → DuplicateInfo，只含有重複的詞彙"""
        result: Dict[str, DuplicateInfo] = {}
        for key, group in self.duplicate_groups().items():
            for entry in group:
                others = [other for other in group if other is not entry]
                result[entry.id] = DuplicateInfo(normalized_key=key, others=others)
        return result

    def duplicates_of(self, entry_id: str) -> Optional[DuplicateInfo]:
        """查詢單筆詞彙的重複資訊；沒有重複時回傳 None"""
        return self.duplicate_map().get(entry_id)
