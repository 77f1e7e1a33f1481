from services.text_normalizer import extract_phrases, normalize


def test_normalize_lowercases_and_strips_punctuation():
    assert normalize("Kubernetes, Docker & CI/CD!") == "kubernetes docker ci cd"


def test_normalize_collapses_whitespace():
    assert normalize("  Python\t\n\n  Go   ") == "python go"


def test_normalize_treats_underscore_as_punctuation():
    assert normalize("snake_case") == "snake case"


def test_normalize_dotted_and_symbol_names():
    assert normalize("Node.js") == "node js"
    assert normalize("C++") == "c"
    assert normalize("C#") == "c"


def test_normalize_empty_and_noise():
    assert normalize("") == ""
    assert normalize("!!! ... ???") == ""


def test_normalize_is_idempotent():
    samples = ["Hello, World!", "  GitHub   Actions ", "naïve café_au-lait", "", "İstanbul"]
    for text in samples:
        once = normalize(text)
        assert normalize(once) == once


def test_extract_phrases_interleaves_windows():
    assert list(extract_phrases("a b c")) == ["a", "a b", "a b c", "b", "b c", "c"]


def test_extract_phrases_keeps_duplicates():
    phrases = list(extract_phrases("go go"))
    assert phrases == ["go", "go go", "go"]


def test_extract_phrases_single_word():
    assert list(extract_phrases("python")) == ["python"]


def test_extract_phrases_empty():
    assert list(extract_phrases("")) == []


def test_extract_phrases_is_restartable():
    text = "github actions pipeline"
    assert list(extract_phrases(text)) == list(extract_phrases(text))
    assert len(list(extract_phrases(text))) == 6
