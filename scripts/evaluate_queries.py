import argparse
import sys

from aqar_query.evaluation import evaluate_cases, load_cases, summarize
from aqar_query.logger_setup import get_logger
from aqar_query.utils import get_now_for_filename, save_df_to_csv

DEFAULT_OUTPUT_DIR = "results/evaluation"

logger = get_logger(__name__)


def main(argv=None) -> int:
    arg_parser = argparse.ArgumentParser(description="Evaluate the query parser against labelled cases.")
    arg_parser.add_argument("cases", help="JSON file with a list of {query, expected} cases")
    arg_parser.add_argument("--output", default=DEFAULT_OUTPUT_DIR, help="Directory for the CSV report")
    args = arg_parser.parse_args(argv)

    cases = load_cases(args.cases)
    df = evaluate_cases(cases)
    save_df_to_csv(df, args.output, get_now_for_filename(), "evaluation")

    summary = summarize(df)
    logger.info(
        f"{summary['passed']}/{summary['total']} cases passed (pass rate {summary['pass_rate']:.2%})"
    )
    for row in df[~df["passed"]].itertuples():
        logger.warning(f"FAILED {row.query!r}: {row.mismatches}")

    return 0 if summary["failed"] == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
