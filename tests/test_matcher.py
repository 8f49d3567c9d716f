"""Tests for safety keyword detection."""

from solace.safety.matcher import detect_safety_keywords


def test_matches_case_insensitive_substring():
    assert detect_safety_keywords("I need some HELP now", ["help"])
    assert detect_safety_keywords("i need some help now", ["HeLp"])


def test_matches_inside_words():
    assert detect_safety_keywords("Thanks for helping me", ["help"])
    assert detect_safety_keywords("that seems dangerous", ["danger"])


def test_no_match():
    assert not detect_safety_keywords("I'm doing fine", ["help", "emergency", "danger", "unsafe"])


def test_any_keyword_is_enough():
    assert detect_safety_keywords("this place feels unsafe", ["help", "unsafe"])


def test_empty_keyword_list_never_matches():
    assert not detect_safety_keywords("help help help", [])


def test_empty_message_never_matches():
    assert not detect_safety_keywords("", ["help"])


def test_blank_keywords_are_ignored():
    assert not detect_safety_keywords("anything at all", ["", "zzz"])


def test_phrase_keyword():
    assert detect_safety_keywords("Someone is Following Me home", ["following me"])


def test_does_not_mutate_inputs():
    keywords = ["Help", "Danger"]
    message = "HELP"
    detect_safety_keywords(message, keywords)
    assert keywords == ["Help", "Danger"]
    assert message == "HELP"


def test_accepts_generator():
    assert detect_safety_keywords("stay safe", (k for k in ["safe"]))
