import pytest

from rustdrill.solutions.hashmaps import (
    Fruit,
    Team,
    build_scores_table,
    default_basket,
    fill_basket,
)

RESULTS = (
    "England,France,4,2\n"
    "France,Italy,3,1\n"
    "Poland,Spain,2,0\n"
    "Germany,England,2,1\n"
)


def _given_basket():
    return {Fruit.APPLE: 4, Fruit.MANGO: 2, Fruit.LYCHEE: 5}


def test_at_least_three_types_of_fruits():
    assert len(default_basket()) >= 3


def test_at_least_five_fruits():
    assert sum(default_basket().values()) >= 5


def test_default_basket_contents():
    assert default_basket()["banana"] == 2


def test_given_fruits_are_not_modified():
    basket = _given_basket()
    fill_basket(basket)
    assert basket[Fruit.APPLE] == 4
    assert basket[Fruit.MANGO] == 2
    assert basket[Fruit.LYCHEE] == 5


def test_at_least_five_types_of_fruits():
    basket = _given_basket()
    fill_basket(basket)
    assert len(basket) >= 5


def test_greater_than_eleven_fruits():
    basket = _given_basket()
    fill_basket(basket)
    assert sum(basket.values()) > 11


def test_build_scores():
    scores = build_scores_table(RESULTS)
    assert sorted(scores) == ["England", "France", "Germany", "Italy", "Poland", "Spain"]


def test_validate_team_score_1():
    team = build_scores_table(RESULTS)["England"]
    assert team.goals_scored == 5
    assert team.goals_conceded == 4


def test_validate_team_score_2():
    team = build_scores_table(RESULTS)["Spain"]
    assert team.goals_scored == 0
    assert team.goals_conceded == 2


def test_team_keeps_its_name():
    assert build_scores_table(RESULTS)["Italy"].name == "Italy"


def test_malformed_line_is_rejected():
    with pytest.raises(ValueError, match="malformed"):
        build_scores_table("England,France,4\n")


def test_bad_goal_count_is_rejected():
    with pytest.raises(ValueError, match="invalid digit"):
        build_scores_table("England,France,four,2\n")


def test_goal_count_above_limit_is_rejected():
    with pytest.raises(ValueError, match="too large"):
        build_scores_table("England,France,256,2\n")


def test_add_goals_overflow():
    team = Team("England", 250, 0)
    with pytest.raises(OverflowError):
        team.add_goals(10, 0)
    assert team.goals_scored == 250