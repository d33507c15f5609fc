import pytest

from ats_engine.services.nlp_utils import (
    TextIndex,
    canonical,
    is_stopword,
    singular_phrase,
    singularize,
    split_clauses,
    tokenize,
)


def test_tokenize_keeps_technical_punctuation():
    tokens = tokenize("Node.js, C++, C# and CI/CD.")
    assert tokens == ["Node.js", "C++", "C#", "and", "CI/CD"]


def test_tokenize_strips_trailing_period():
    assert tokenize("Shipped to AWS.") == ["Shipped", "to", "AWS"]


def test_split_clauses_breaks_on_punctuation():
    clauses = split_clauses("Python, SQL; machine learning (PyTorch). Go fast")
    assert clauses == [["Python"], ["SQL"], ["machine", "learning"], ["PyTorch"], ["Go", "fast"]]


def test_split_clauses_keeps_dotted_names_together():
    assert split_clauses("Experience with Node.js required") == [
        ["Experience", "with", "Node.js", "required"]
    ]


@pytest.mark.parametrize(
    "word,expected",
    [
        ("microservices", "microservice"),
        ("technologies", "technology"),
        ("boxes", "box"),
        ("churches", "church"),
        ("aws", "aws"),
        ("status", "status"),
        ("express", "express"),
        ("deployed", "deployed"),
        ("building", "building"),
        ("reacted", "reacted"),
    ],
)
def test_singularize(word, expected):
    assert singularize(word) == expected


def test_singular_phrase():
    assert singular_phrase("Distributed Systems") == "distributed system"


def test_canonical_aliases():
    assert canonical("K8s") == "kubernetes"
    assert canonical("NodeJS") == "node.js"
    assert canonical("Back-End") == "backend"
    assert canonical("RESTful APIs") == "rest api"
    assert canonical("Python") == "python"


def test_stopwords():
    assert is_stopword("The")
    assert is_stopword("experience")
    assert not is_stopword("python")
    assert not is_stopword("years")


class TestTextIndex:
    def test_case_insensitive(self):
        index = TextIndex.build("Built services on AWS")
        assert index.contains("aws")
        assert index.contains("AWS")

    def test_respects_word_boundaries(self):
        index = TextIndex.build("Designed a javascript-free landing page")
        assert not index.contains("java")
        assert not TextIndex.build("Tuned the Reactor event loop").contains("react")

    def test_alias_matches(self):
        index = TextIndex.build("Ran workloads on k8s")
        assert index.contains("Kubernetes")

    def test_short_alias_does_not_match_inside_dotted_name(self):
        index = TextIndex.build("Built APIs in Node.js")
        assert index.contains("Node.js")
        assert not index.contains("JavaScript")

    def test_plural_fallback(self):
        index = TextIndex.build("Split the monolith into a microservice architecture")
        assert index.contains("microservices")
        assert TextIndex.build("Maintained REST APIs").contains("REST API")

    def test_verb_inflections_do_not_match_technologies(self):
        index = TextIndex.build("Reacted to incidents; expressed ideas; sparked growth")
        assert not index.contains("React")
        assert not index.contains("Express")
        assert not index.contains("Spark")

    def test_blank_term(self):
        assert not TextIndex.build("anything").contains("  ")
