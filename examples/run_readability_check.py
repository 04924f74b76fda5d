"""
Tiny helper script to eyeball scores and issues for a couple of sample passages.
"""

from __future__ import annotations

from readability_checker import analyze_readability
from readability_checker.scoring import describe_reading_ease


def main() -> None:
    samples = [
        "The cat sat on the mat. It was raining outside, but the cat was warm and happy.",
        "We leverage a cross-functional paradigm to optimize the implementation of "
        "organizational responsibilities, which were delegated and were documented "
        "by the interdepartmental committee.",
    ]

    for sample in samples:
        report = analyze_readability(sample)
        scores = report.scores
        print("-" * 40)
        print(sample)
        print(
            f"Reading ease: {scores.flesch_reading_ease:.1f} "
            f"({describe_reading_ease(scores.flesch_reading_ease)})"
        )
        print(f"Average grade level: {scores.average_grade_level:.1f}")
        for issue in report.issues:
            print(f"[{issue.type}] {issue.description} {issue.suggestion}")


if __name__ == "__main__":
    main()
