import io

import pytest

from searchlab.expert import (
    CSV_HEADER,
    Employee,
    Evaluation,
    TeamSummary,
    main,
    summarize,
)


def _employee(rating, name="alice", late_days=0):
    return Employee(name, "E1", "Sales", rating, rating, rating, rating, rating, late_days)


def test_perfect_ratings_are_excellent_with_promotion():
    result = _employee(10).evaluate()
    assert result.final_score == pytest.approx(10)
    assert result.performance == "Excellent"
    assert result.badge == "Gold badge"
    assert result.recommendation == "Recommendation for promotion"
    assert result.suggestions == ()


def test_high_but_not_top_excellent_gets_bonus():
    result = _employee(8.8).evaluate()
    assert result.performance == "Excellent"
    assert result.recommendation == "Eligible for bonus"


def test_good_band_maintains_behaviour():
    result = _employee(7.5).evaluate()
    assert result.performance == "Good"
    assert result.badge == "Silver Badge"
    assert result.recommendation == "Maintain current Behaviour"


def test_average_band_without_suggestions_at_six():
    result = _employee(6).evaluate()
    assert result.performance == "Average"
    assert result.badge == "Needs focus"
    assert result.recommendation == "Needs improvement and training"
    assert result.suggestions == ()


def test_poor_band_lists_every_suggestion():
    result = _employee(4).evaluate()
    assert result.performance == "Poor"
    assert result.badge == "Critical Alert"
    assert result.recommendation == "Counselling recommended"
    assert result.suggestions == (
        "Improve Punctuality",
        "Improve Task Completion",
        "Improve Quality of Work",
        "Improve Communication",
        "Improve Teamwork",
    )


def test_score_weights_sum_to_one():
    for rating in (0, 3, 7, 10):
        assert _employee(rating).evaluate().final_score == pytest.approx(rating)


def test_salary_penalty_per_late_day():
    on_time = _employee(7, late_days=0).evaluate()
    late = _employee(7, late_days=3).evaluate()
    assert on_time.salary == 50000
    assert on_time.salary - late.salary == 3 * 500


def test_report_lists_fields_and_suggestions():
    text = _employee(4, name="bob").evaluate().report()
    lines = text.splitlines()
    assert lines[0] == "=====Performance Evaluation Report====="
    assert "Name           : bob" in lines
    assert "Improvement suggestions:" in lines
    assert "- Improve Teamwork" in lines
    assert text.endswith("\n")


def test_csv_row_fields():
    result = _employee(6, name="carol").evaluate()
    fields = result.csv_row().split(",")
    assert len(fields) == len(CSV_HEADER.split(","))
    assert fields[0] == "carol"
    assert fields[4] == result.performance
    assert float(fields[6]) == result.salary


def test_summarize_average_and_first_best_wins():
    evaluations = [
        _employee(6, name="a").evaluate(),
        _employee(9.5, name="b").evaluate(),
        _employee(9.5, name="c").evaluate(),
    ]
    summary = summarize(evaluations)
    assert isinstance(summary, TeamSummary)
    assert summary.best_performer == "b"
    assert summary.best_score == evaluations[1].final_score
    assert summary.average == pytest.approx(sum(e.final_score for e in evaluations) / 3)


def test_summarize_empty_rejected():
    with pytest.raises(ValueError):
        summarize([])


def test_evaluation_keeps_employee():
    employee = _employee(7)
    result = employee.evaluate()
    assert isinstance(result, Evaluation)
    assert result.employee == employee


def test_main_writes_summary_file(monkeypatch, capsys, tmp_path):
    output = tmp_path / "summary.txt"
    stdin = "dana E7 Ops 7 7 7 7 7 1 y\nerin E8 Ops 9.5 9.5 9.5 9.5 9.5 0 n\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(stdin))
    assert main(["--output", str(output)]) == 0
    lines = output.read_text(encoding="utf-8").splitlines()
    assert lines[0] == CSV_HEADER
    assert lines[1].startswith("dana,E7,Ops,")
    assert lines[2].startswith("erin,E8,Ops,")
    assert lines[-1].startswith("Best Performer    : erin")
    out = capsys.readouterr().out
    assert "==== Evaluation Session Summary ====" in out


def test_main_without_any_employee_fails(monkeypatch, tmp_path):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main(["--output", str(tmp_path / "out.txt")]) == 1