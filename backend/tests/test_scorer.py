from interview_coach.interview.scorer import HeuristicScores, round_half_up, score_answers


def test_empty_answers_give_baseline_scores():
    scores = score_answers([])

    assert scores == HeuristicScores(
        communication=60,
        technical=30,
        structure=20,
        confidence=80,
        behavioral=40,
        problem_solving=50,
        length_score=20,
    )


def test_two_hedges_cost_twelve_points_each():
    scores = score_answers(["Maybe I could do it", "i guess so"])
    assert scores.confidence == 56


def test_confidence_is_floored_at_forty():
    answers = ["maybe, i guess, sort of, perhaps, it might work, not sure, I have little experience"]
    assert score_answers(answers).confidence == 40


def test_technical_keywords():
    scores = score_answers(["I use Python and Docker on AWS"])
    # python, docker, aws -> round(3/5 * 60) + 30
    assert scores.technical == 66


def test_star_score_rounds_half_up():
    scores = score_answers(["The situation was hard, my task was clear, the outcome: result was good"])
    # situation, task, result -> 52.5 rounds to 53
    assert scores.structure == 73


def test_behavioral_and_problem_solving_hits():
    scores = score_answers(["We worked together as a team to debug it and find the root cause"])

    assert scores.behavioral == 85
    assert scores.problem_solving == 80


def test_communication_buckets():
    assert score_answers(["Short one. Another one."]).communication == 80
    assert score_answers(["x" * 59 + "."]).communication == 70
    assert score_answers(["x" * 120]).communication == 55


def test_length_score_is_clamped():
    assert score_answers(["a" * 10]).length_score == 20
    assert score_answers(["a" * 100]).length_score == 50
    assert score_answers(["a" * 500]).length_score == 90


def test_keywords_count_once_per_entry():
    once = score_answers(["python"])
    repeated = score_answers(["python python python", "python"])
    assert once.technical == repeated.technical == 42


def test_scores_are_deterministic_and_bounded():
    samples = [
        [],
        [""],
        ["yes"],
        ["Situation: slow API. Task: reduce latency. Action: added caching. Result: 40% faster."],
        ["We led the team, collaborated with stakeholders and mentored juniors together."] * 6,
        ["java python c++ c# javascript node react spring sql database algorithm complexity big o docker kubernetes aws gcp azure"],
        ["maybe perhaps i guess", "debug investigate root cause diagnose reproduce analysis optimize"],
    ]
    for answers in samples:
        first = score_answers(answers)
        second = score_answers(list(answers))
        assert first == second
        for value in first.breakdown().values():
            assert isinstance(value, int)
            assert 0 <= value <= 100
        assert 20 <= first.length_score <= 90


def test_round_half_up():
    assert round_half_up(52.5) == 53
    assert round_half_up(2.5) == 3
    assert round_half_up(2.49) == 2
