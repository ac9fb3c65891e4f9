import pytest

from kana_practice.core.models import Question


def test_question_stores_options_as_tuple() -> None:
    question = Question(prompt="Q", options=["a", "b"], correct_index=1)

    assert question.options == ("a", "b")
    assert question.option_count == 2


@pytest.mark.parametrize(
    ("options", "correct_index"),
    [
        (["only"], 0),
        ([], 0),
        (["a", "b"], 2),
        (["a", "b"], -1),
    ],
)
def test_invalid_questions_fail_fast(options: list[str], correct_index: int) -> None:
    with pytest.raises(ValueError):
        Question(prompt="Q", options=options, correct_index=correct_index)


def test_empty_prompt_is_rejected() -> None:
    with pytest.raises(ValueError):
        Question(prompt="   ", options=["a", "b"], correct_index=0)


def test_blank_explanation_is_treated_as_missing() -> None:
    question = Question(prompt="Q", options=["a", "b"], correct_index=0, explanation="  ")

    assert question.explanation is None


def test_topic_id_prefers_character() -> None:
    with_character = Question(prompt=" Q ", options=["a", "b"], correct_index=0, character="か")
    without_character = Question(prompt=" Q ", options=["a", "b"], correct_index=0)

    assert with_character.topic_id == "か"
    assert without_character.topic_id == "Q"


def test_option_labels_follow_option_order() -> None:
    question = Question(prompt="Pick", options=("a", "b", "c"), correct_index=0)

    assert question.option_labels == ("A", "B", "C")


def test_option_labels_extend_past_f() -> None:
    question = Question(prompt="Pick", options=[str(i) for i in range(8)], correct_index=0)

    assert question.option_labels[-2:] == ("G", "H")
