"""
Main entry point for the Interview Coach.
Provides a CLI interface: analyze a resume against a job description, then
run the mock interview in the terminal.
"""
import sys
from pathlib import Path

import config
from agents.analyzer import analyze
from errors import InterviewCoachError
from graph import InterviewRunner


def print_separator():
    print("=" * 60)


def read_text(path: str) -> str:
    """Read a text file, or stdin when path is '-'."""
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def print_analysis(analysis):
    print_separator()
    print(f"MATCH SCORE: {analysis.match_score}% ({analysis.band.value})")
    print_separator()
    print(f"\n{analysis.summary}\n")

    print("Strengths:")
    print("-" * 40)
    for strength in analysis.strengths:
        print(f"  - {strength}")

    print("\nMissing Skills:")
    print("-" * 40)
    for skill in analysis.missing_skills:
        print(f"  - {skill}")

    print("\nInterview Questions:")
    print("-" * 40)
    for i, question in enumerate(analysis.interview_questions, 1):
        print(f"  {i}. [{question.type.value}] {question.question}")
    print()


def print_summary(summary):
    print_separator()
    print("INTERVIEW COMPLETE")
    print_separator()
    print(f"\nOverall Score: {summary.overall_score}% ({summary.band.value})")
    print(f"Recommendation: {summary.recommendation.value}")
    print(f"\n{summary.summary}\n")

    if summary.strengths:
        print("Strengths:")
        print("-" * 40)
        for strength in summary.strengths:
            print(f"  - {strength}")

    if summary.improvements:
        print("\nAreas to Improve:")
        print("-" * 40)
        for item in summary.improvements:
            print(f"  - {item}")
    print()


def run_interview(runner: InterviewRunner):
    """Run an interactive interview session."""
    print(f"Interviewer: {runner.start()}\n")
    shown = len(runner.get_messages())

    while not runner.is_complete():
        try:
            if runner.summary_pending:
                input("Press Enter to retry the summary (Ctrl+C to quit)...")
                runner.retry_summary()
            else:
                answer = input("You: ").strip()

                if not answer:
                    continue

                if answer.lower() in ["quit", "exit", "q"]:
                    print("\nEnding interview early...")
                    return

                runner.submit_answer(answer)
        except InterviewCoachError as exc:
            print(f"\n[ERROR] {exc.user_message}\n")
            continue
        except (KeyboardInterrupt, EOFError):
            print("\n\nEnding interview...")
            return

        # Print every assistant message added this turn
        messages = runner.get_messages()
        for msg in messages[shown:]:
            if msg["role"] == "assistant":
                print(f"\nInterviewer: {msg['content']}\n")
        shown = len(messages)

    print_summary(runner.summary)


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="AI Interview Coach",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands during interview:
  quit, exit, q  - End the interview early

Examples:
  python main.py --jd job.txt --resume resume.txt
  python main.py --jd job.txt --resume - < resume.txt
  python main.py --jd job.txt --resume resume.txt --no-interview
        """,
    )
    parser.add_argument("--jd", required=True, help="Job description file ('-' for stdin)")
    parser.add_argument("--resume", required=True, help="Resume file ('-' for stdin)")
    parser.add_argument(
        "--no-interview",
        action="store_true",
        help="Only print the match analysis",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default from LOG_LEVEL)")

    args = parser.parse_args()
    config.configure_logging(args.log_level)

    if args.jd == "-" and args.resume == "-":
        parser.error("Only one of --jd and --resume can read from stdin")

    job_description = read_text(args.jd)
    resume = read_text(args.resume)

    try:
        analysis = analyze(job_description, resume)
    except InterviewCoachError as exc:
        print(f"[ERROR] {exc.user_message}")
        sys.exit(1)

    print_analysis(analysis)

    if args.no_interview or not analysis.interview_questions:
        return

    run_interview(InterviewRunner.from_analysis(analysis, job_description))


if __name__ == "__main__":
    main()
