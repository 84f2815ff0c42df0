import pytest

from cvmatch.services.matching_strategy import (
    KeywordMatchingStrategy,
    SkillBasedMatchingStrategy,
    build_strategy,
    count_occurrences,
    find_missing_skills,
    tokenize,
)
from conftest import make_job


@pytest.fixture
def strategy():
    return SkillBasedMatchingStrategy()


# ── Skill-based ─────────────────────────────────────────────────────────────


def test_repeated_mentions_add_bonus_and_score_is_clamped(strategy):
    job = make_job("1", "C# Developer", "We use C# daily. C# and Docker in production.")

    result = strategy.calculate_match(["C#", "Docker"], job)

    assert result.matched_skills == ["C#", "Docker"]
    assert result.missing_skills == []
    # base 100 + bonus 2, clamped
    assert result.match_score == 100
    assert result.match_explanation == (
        "Match: 2 of 2 skills (100%). Strong matches: C# (3x), Docker (1x). "
        "No critical skills are missing."
    )
    assert result.job == job


def test_partial_match_with_missing_skills(strategy):
    job = make_job("2", "Python developer", "Python, Python and Kubernetes on AWS with REST API")

    result = strategy.calculate_match(["Python", "Docker"], job)

    assert result.matched_skills == ["Python"]
    assert result.missing_skills == ["Kubernetes", "AWS", "REST", "API"]
    # base 50 + bonus 2 - penalty 20
    assert result.match_score == 32
    assert result.match_explanation == (
        "Match: 1 of 2 skills (50%). Strong matches: Python (3x). "
        "4 relevant skills are missing from the CV."
    )


def test_single_mentions_do_not_list_strong_matches(strategy):
    result = strategy.calculate_match(["Docker"], make_job("3", "Docker role"))
    assert result.match_explanation == "Match: 1 of 1 skills (100%). No critical skills are missing."


def test_empty_skill_list_scores_zero(strategy):
    result = strategy.calculate_match([], make_job("4", "Docker engineer", "Docker everywhere"))

    assert result.match_score == 0
    assert result.matched_skills == []
    assert result.missing_skills == ["Docker"]
    assert result.match_explanation.startswith("Match: 0 of 0 skills (0%).")


def test_missing_penalty_is_capped_at_thirty(strategy):
    description = "java javascript typescript react angular vue docker kubernetes azure aws"
    result = strategy.calculate_match(["Python"], make_job("5", "Python", description))

    assert len(result.missing_skills) == 10
    assert result.match_score == 70


def test_frequency_bonus_is_capped_per_skill(strategy):
    result = strategy.calculate_match(["Go", "Rust"], make_job("6", "Backend", "go " * 10))
    # base 50 + min(10 - 1, 5)
    assert result.match_score == 55


def test_missing_skills_compare_whole_skill_names(strategy):
    result = strategy.calculate_match(["REST API"], make_job("7", "REST API design"))
    assert result.matched_skills == ["REST API"]
    assert result.missing_skills == ["REST", "API"]


@pytest.mark.parametrize(
    "skills, description",
    [
        (["C#"] * 50, "c# " * 200),
        ([], "java python docker kubernetes aws azure git scrum agile tdd solid"),
        (["Nothing"], "sql nosql react vue angular"),
    ],
)
def test_score_stays_in_range(strategy, skills, description):
    result = strategy.calculate_match(skills, make_job("8", "", description))
    assert 0 <= result.match_score <= 100


def test_same_input_gives_same_result(strategy):
    job = make_job("9", "Python and Docker", "Python, SQL, Git")
    skills = ["Python", "Docker", "Leadership"]
    assert strategy.calculate_match(skills, job) == strategy.calculate_match(skills, job)


def test_count_occurrences_does_not_overlap():
    assert count_occurrences("aaaa", "aa") == 2
    assert count_occurrences("C# and c#", "c#") == 2
    assert count_occurrences("anything", "") == 0


def test_find_missing_skills_ignores_case_of_cv_skills():
    assert find_missing_skills("docker and git", ["DOCKER"]) == ["Git"]


# ── Keyword ─────────────────────────────────────────────────────────────────


def test_keyword_strategy_scores_token_overlap():
    job = make_job("k1", "Python Developer", "Python, Django and Docker.")

    result = KeywordMatchingStrategy().calculate_match(["Python", "Docker", "Go"], job)

    # job tokens: python, developer, django, and, docker
    assert result.match_score == 40
    assert result.matched_skills == ["python", "docker"]
    assert result.missing_skills == []
    assert result.match_explanation == "Keyword match: 2 common keywords found."


def test_keyword_strategy_handles_empty_job_text():
    result = KeywordMatchingStrategy().calculate_match(["Python"], make_job("k2", ""))
    assert result.match_score == 0
    assert result.matched_skills == []


def test_keyword_strategy_reports_at_most_ten_tokens():
    words = [f"skill{i}" for i in range(15)]
    job = make_job("k3", " ".join(words))
    result = KeywordMatchingStrategy().calculate_match(words, job)
    assert result.match_score == 100
    assert result.matched_skills == words[:10]


def test_tokenize_drops_short_tokens():
    assert tokenize("Go, C# and SQL; ok: Docker.") == ["and", "sql", "docker"]


# ── Selection ───────────────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "name, expected",
    [("skill_based", "Skill-Based Matching"), ("keyword", "Keyword Matching")],
)
def test_build_strategy(name, expected):
    assert build_strategy(name).strategy_name == expected


def test_build_strategy_rejects_unknown_name():
    with pytest.raises(ValueError):
        build_strategy("semantic")
