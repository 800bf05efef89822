"""A small rule-based expert system for employee performance evaluation."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

BASE_SALARY = 50000.0
LATE_DAY_PENALTY = 500.0
CSV_HEADER = "Name,ID,Department,Score,Performance,Badge,Salary"

_WEIGHTS = {
    "punctuality": 0.10,
    "task_completion": 0.3,
    "quality": 0.25,
    "communication": 0.15,
    "teamwork": 0.2,
}

_SUGGESTIONS = {
    "punctuality": "Improve Punctuality",
    "task_completion": "Improve Task Completion",
    "quality": "Improve Quality of Work",
    "communication": "Improve Communication",
    "teamwork": "Improve Teamwork",
}


@dataclass(frozen=True)
class Employee:
    """An employee with ratings on a 0-10 scale and a count of late days."""

    name: str
    employee_id: str
    department: str
    punctuality: float
    task_completion: float
    quality: float
    communication: float
    teamwork: float
    late_days: int = 0
    base_salary: float = BASE_SALARY

    def evaluate(self) -> Evaluation:
        """Score the employee and derive rating, badge, advice and salary."""
        score = sum(getattr(self, field) * weight for field, weight in _WEIGHTS.items())
        if score >= 8.5:
            performance, badge = "Excellent", "Gold badge"
            recommendation = (
                "Recommendation for promotion" if score > 9.0 else "Eligible for bonus"
            )
        elif score >= 7.0:
            performance, badge = "Good", "Silver Badge"
            recommendation = (
                "Eligible for bonus" if score > 8.0 else "Maintain current Behaviour"
            )
        elif score >= 5:
            performance, badge = "Average", "Needs focus"
            recommendation = "Needs improvement and training"
        else:
            performance, badge = "Poor", "Critical Alert"
            recommendation = "Counselling recommended"

        suggestions = tuple(
            advice for field, advice in _SUGGESTIONS.items() if getattr(self, field) < 6
        )
        salary = self.base_salary - self.late_days * LATE_DAY_PENALTY
        return Evaluation(
            employee=self,
            final_score=score,
            performance=performance,
            badge=badge,
            recommendation=recommendation,
            suggestions=suggestions,
            salary=salary,
        )


@dataclass(frozen=True)
class Evaluation:
    """The outcome of evaluating one employee."""

    employee: Employee
    final_score: float
    performance: str
    badge: str
    recommendation: str
    suggestions: tuple[str, ...]
    salary: float

    def report(self) -> str:
        """Human-readable report, ending with a newline."""
        employee = self.employee
        lines = [
            "=====Performance Evaluation Report=====",
            f"Name           : {employee.name}",
            f"Id             : {employee.employee_id}",
            f"Department     : {employee.department}",
            f"Final Score    : {self.final_score:.2f}/10",
            f"Performance    : {self.performance}  {self.badge}",
            f"Recommendation : {self.recommendation}",
            f"Salary         : {self.salary:.2f}",
        ]
        if self.suggestions:
            lines.append("Improvement suggestions:")
            lines.extend(f"- {advice}" for advice in self.suggestions)
        return "\n".join(lines) + "\n"

    def csv_row(self) -> str:
        """One comma-separated summary line, without a line ending."""
        employee = self.employee
        return ",".join(
            [
                employee.name,
                employee.employee_id,
                employee.department,
                f"{self.final_score:.2f}",
                self.performance,
                self.badge,
                f"{self.salary:.2f}",
            ]
        )


@dataclass(frozen=True)
class TeamSummary:
    """Average score of a session and its best performer."""

    average: float
    best_performer: str
    best_score: float


def summarize(evaluations: Iterable[Evaluation]) -> TeamSummary:
    """Average the scores; the first employee with the strictly highest score wins."""
    evaluations = list(evaluations)
    if not evaluations:
        raise ValueError("no evaluations to summarize")
    best_name, best_score = "", 0.0
    for evaluation in evaluations:
        if evaluation.final_score > best_score:
            best_name, best_score = evaluation.employee.name, evaluation.final_score
    average = sum(e.final_score for e in evaluations) / len(evaluations)
    return TeamSummary(average, best_name, best_score)


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _ask(tokens: Iterator[str], prompt: str) -> str:
    print(prompt, end="", flush=True)
    try:
        return next(tokens)
    except StopIteration:
        raise EOFError("unexpected end of input") from None


def _read_employee(tokens: Iterator[str]) -> Employee:
    name = _ask(tokens, "Enter employee name: ")
    employee_id = _ask(tokens, "Enter employee id: ")
    department = _ask(tokens, "Enter employee department: ")
    print("==Rate on the scale of (0-10)==")
    punctuality = float(_ask(tokens, "Punctuality: "))
    task_completion = float(_ask(tokens, "Task Completion: "))
    quality = float(_ask(tokens, "Quality of work: "))
    communication = float(_ask(tokens, "Communication: "))
    teamwork = float(_ask(tokens, "Teamwork: "))
    late_days = int(_ask(tokens, "Enter number of late days this month: "))
    return Employee(
        name,
        employee_id,
        department,
        punctuality,
        task_completion,
        quality,
        communication,
        teamwork,
        late_days,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Evaluate employees read from standard input and save a summary file."""
    parser = argparse.ArgumentParser(description="Employee performance expert system.")
    parser.add_argument(
        "--output", default="employee_summary.txt", help="summary file to write"
    )
    args = parser.parse_args(argv)

    tokens = _tokens(sys.stdin)
    history: list[Evaluation] = []
    with open(args.output, "w", encoding="utf-8") as out:
        out.write(CSV_HEADER + "\n")
        while True:
            try:
                evaluation = _read_employee(tokens).evaluate()
            except (EOFError, ValueError) as error:
                print(f"\nerror: {error}", file=sys.stderr)
                break
            print(evaluation.report(), end="")
            out.write(evaluation.csv_row() + "\n")
            history.append(evaluation)
            try:
                choice = _ask(tokens, "\nDo you want to evaluate another employee? (y/n): ")
            except EOFError:
                break
            if choice[0] not in "yY":
                break

        if not history:
            return 1

        summary = summarize(history)
        out.write(f"\nTeam Average Score: {summary.average:.2f}/10\n")
        out.write(f"Best Performer    : {summary.best_performer} ({summary.best_score:.2f})\n")

    print("\n==== Evaluation Session Summary ====")
    for evaluation in history:
        print(evaluation.report(), end="")
    print(f"\nTeam Average Score: {summary.average:.2f}/10")
    print(f"Best Performer    : {summary.best_performer} with score {summary.best_score:.2f}")
    print(f"\nSummary report saved to '{args.output}'")
    print("Thank you for using the Employee Performance Expert System.")
    return 0


if __name__ == "__main__":
    sys.exit(main())