from __future__ import annotations

import pytest

from korean_romanizer.domain.romanization_rr import (
    RRSegment,
    consonant_rr,
    romanize,
    romanize_detailed,
    to_title_case,
)


def test_simple() -> None:
    assert romanize("안녕하세요") == "annyeonghaseyo"


def test_spaced_text() -> None:
    assert romanize("아이유 방탄소년단") == "aiyu bangtansonyeondan"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("구미", "gumi"),
        ("한밭", "hanbat"),
        ("좋아하고", "joahago"),
        ("앉고싶다", "angosipda"),
        ("영동", "yeongdong"),
    ],
)
def test_reference_words(text: str, expected: str) -> None:
    assert romanize(text) == expected


@pytest.mark.parametrize(
    "alone, alone_rr, followed, followed_rr",
    [
        ("국", "guk", "국어", "gugeo"),
        ("닫", "dat", "닫아", "dada"),
        ("입", "ip", "입어", "ibeo"),
        ("달", "dal", "달이", "dari"),
    ],
)
def test_gdbr_depend_on_following_vowel(alone: str, alone_rr: str, followed: str, followed_rr: str) -> None:
    assert romanize(alone) == alone_rr
    assert romanize(followed) == followed_rr


def test_consonant_rr_forms() -> None:
    assert [consonant_rr(c, True) for c in "ㄱㄷㅂㄹ"] == ["g", "d", "b", "r"]
    assert [consonant_rr(c, False) for c in "ㄱㄷㅂㄹ"] == ["k", "t", "p", "l"]
    assert consonant_rr("ㅇ", True) == ""
    assert consonant_rr("ㅇ", False) == "ng"
    assert consonant_rr("ㅊ", True) == consonant_rr("ㅊ", False) == "ch"
    with pytest.raises(ValueError):
        consonant_rr("ㄳ", False)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("밝다", "bakda"),
        ("바닷가", "badatga"),
        ("없다", "eopda"),
        ("앞만", "apman"),
        ("읊다", "eupda"),
    ],
)
def test_final_neutralization(text: str, expected: str) -> None:
    assert romanize(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("않라", "anra"),
        ("좋라", "jora"),
        ("좋며", "jomyeo"),
        ("잃며", "ilmyeo"),
    ],
)
def test_h_final_dropped_before_other_onsets(text: str, expected: str) -> None:
    assert romanize(text) == expected


def test_rieul_onset_after_rieul_final_stays_r() -> None:
    # no lateralization: ㄹㄹ is spelled lr
    assert romanize("빨리") == "ppalri"
    assert romanize("울릉") == "ulreung"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("강약", "gangyak"),
        ("강원", "gangwon"),
        ("좋은", "joeun"),
        ("설악", "seorak"),
    ],
)
def test_next_syllable_null_initial(text: str, expected: str) -> None:
    assert romanize(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("했었어요", "haesseosseoyo"),
        ("없었다", "eopseotda"),
        ("앉아봐", "anjabwa"),
        ("닭의", "dalgui"),
        ("밟아", "balba"),
        ("닮았네", "dalmatne"),
        ("삯을", "sakseul"),
        ("앓았다", "aratda"),
        ("읊어 보거라", "eulpeo bogeora"),
        ("곬이", "golssi"),
        ("훑어보다", "hulteoboda"),
    ],
)
def test_double_final_before_vowel(text: str, expected: str) -> None:
    assert romanize(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("뚫리다", "ttulrida"),
        ("칡뿌리", "chikppuri"),
        ("괜찮", "gwaenchan"),
        ("뚫", "ttul"),
        ("않", "an"),
        ("않습니다", "ansseupnida"),
        ("앓고", "alko"),
    ],
)
def test_double_final_before_consonant_or_end(text: str, expected: str) -> None:
    assert romanize(text) == expected


def test_compat_jamo() -> None:
    assert romanize("ㅠㄴㅁㄱ") == "yunmg"
    assert romanize("ㅠ동") == "yudong"
    # no RR spelling for complex jamo
    assert romanize("ㄳ") == "ㄳ"


@pytest.mark.parametrize("text", ["", "Hello, world!", "abc 123", "漢字", "\n\t"])
def test_pass_through(text: str) -> None:
    assert romanize(text) == text


def test_mixed_scripts() -> None:
    assert romanize("서울 Seoul 2024") == "seoul Seoul 2024"


def test_add_spaces() -> None:
    assert romanize("안녕하세요", add_spaces=True) == "an nyeong ha se yo"
    # existing whitespace is not doubled
    assert romanize("아이유 방탄", add_spaces=True) == "a i yu bang tan"


def test_title_case() -> None:
    assert romanize("안녕하세요", title_case=True) == "Annyeonghaseyo"
    assert romanize("안녕하세요", add_spaces=True, title_case=True) == "An Nyeong Ha Se Yo"
    assert romanize("홍길동", True, True) == "Hong Gil Dong"


def test_to_title_case() -> None:
    assert to_title_case("hELLO wORLD") == "Hello World"
    assert to_title_case("a  b") == "A  B"
    assert to_title_case("") == ""


def test_romanize_rejects_non_str() -> None:
    with pytest.raises(TypeError):
        romanize(None)  # type: ignore[arg-type]


def test_romanize_detailed_segments() -> None:
    result = romanize_detailed("국어")
    assert result.rr == "gugeo"
    assert result.segments == [
        RRSegment(text="g", role="consonant"),
        RRSegment(text="u", role="vowel"),
        RRSegment(text="g", role="consonant"),
        RRSegment(text="eo", role="vowel"),
    ]
    assert "RR spelling: gugeo" in result.hint
    assert "Pronounced as: 구거" in result.hint


def test_romanize_detailed_finals_and_text() -> None:
    result = romanize_detailed("강!")
    assert result.rr == "gang!"
    assert [s.role for s in result.segments] == ["consonant", "vowel", "final", "text"]


def test_romanize_detailed_empty() -> None:
    result = romanize_detailed("")
    assert result.rr == ""
    assert result.segments == []
