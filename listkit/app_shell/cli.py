import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from listkit.adapters.random_source import SeededRandom
from listkit.adapters.rules_port import RulesAdapter
from listkit.components import combinatorics, list_utils
from listkit.components.list_utils import Run
from listkit.rules.loader import load_rules
from listkit.rules.models import Rules, default_rules

logger = logging.getLogger("cli")

RULES_PATH = "rules.yaml"

EXIT_RULES_ERROR = 1
EXIT_INVALID_ARGUMENT = 2

# Operation name -> names of its integer arguments, in order.
TRANSFORM_ARGS: dict[str, list[str]] = {
    "last_two": [],
    "reverse": [],
    "flatten": [],
    "compress": [],
    "pack": [],
    "encode": [],
    "encode_modified": [],
    "encode_direct": [],
    "duplicate": [],
    "replicate": ["times"],
    "drop": ["every"],
    "rotate": ["places"],
    "remove_at": ["position"],
}


def get_rules(path: str | None) -> Rules:
    """Load the rules file, falling back to defaults when none is configured."""
    if path is not None:
        return load_rules(Path(path))
    if Path(RULES_PATH).exists():
        return load_rules(Path(RULES_PATH))
    return default_rules()


def to_jsonable(value: Any) -> Any:
    """Runs become ``[count, element]``; tuples become lists."""
    if isinstance(value, Run):
        return [value.count, to_jsonable(value.element)]
    if isinstance(value, (list, tuple)):
        return [to_jsonable(member) for member in value]
    return value


def from_jsonable_entries(entries: list[Any]) -> list[Any]:
    """Read ``[count, element]`` pairs with a positive int count back as runs."""
    decoded: list[Any] = []
    for entry in entries:
        if (
            isinstance(entry, list)
            and len(entry) == 2
            and isinstance(entry[0], int)
            and not isinstance(entry[0], bool)
            and entry[0] > 0
        ):
            decoded.append(Run(entry[0], entry[1]))
        else:
            decoded.append(entry)
    return decoded


def parse_list(text: str) -> list[Any]:
    try:
        value = json.loads(text)
    except json.JSONDecodeError as e:
        raise argparse.ArgumentTypeError(f"not valid JSON: {e}") from e
    if not isinstance(value, list):
        raise argparse.ArgumentTypeError("expected a JSON list")
    return value


def parse_json(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise argparse.ArgumentTypeError(f"not valid JSON: {e}") from e


def dispatch(args: argparse.Namespace, rules: Rules) -> Any:
    """Build the component input for the parsed command and run it."""
    port = RulesAdapter(rules)
    command = args.command

    if command in ("last", "element_at"):
        return list_utils.run_lookup(
            list_utils.LookupInput(command, args.items, getattr(args, "position", None)),
            rules=port,
        )
    if command in ("length", "is_palindrome"):
        return list_utils.run_measure(list_utils.MeasureInput(command, args.items), rules=port)
    if command in TRANSFORM_ARGS:
        names = TRANSFORM_ARGS[command]
        argument = getattr(args, names[0]) if names else None
        return list_utils.run_transform(
            list_utils.TransformInput(command, args.items, argument), rules=port
        )
    if command == "decode":
        entries = from_jsonable_entries(args.items)
        return list_utils.run_decode(list_utils.DecodeInput(entries), rules=port)
    if command == "split":
        return list_utils.run_split(list_utils.SplitInput(args.items, args.count), rules=port)
    if command == "slice":
        return list_utils.run_slice(
            list_utils.SliceInput(args.items, args.start, args.end), rules=port
        )
    if command == "insert_at":
        return list_utils.run_insert(
            list_utils.InsertInput(args.element, args.items, args.position), rules=port
        )
    if command == "range":
        return list_utils.run_range(list_utils.RangeInput(args.start, args.finish), rules=port)

    seed = getattr(args, "seed", None)
    random = SeededRandom(seed if seed is not None else rules.random.seed)
    if command == "random_select":
        return combinatorics.run_select(
            combinatorics.SelectInput(command, args.items, args.count), random=random, rules=port
        )
    if command == "random_permutation":
        return combinatorics.run_select(
            combinatorics.SelectInput(command, args.items), random=random, rules=port
        )
    if command == "lotto":
        return combinatorics.run_lotto(
            combinatorics.LottoInput(args.count, args.maximum), random=random, rules=port
        )
    if command == "combinations":
        return combinatorics.run_combine(
            combinatorics.CombineInput(args.items, args.size), rules=port
        )
    if command == "group":
        return combinatorics.run_group(
            combinatorics.GroupInput(args.items, tuple(args.sizes)), rules=port
        )
    if command in ("length_sort", "length_frequency_sort"):
        return combinatorics.run_sort(combinatorics.SortInput(command, args.items), rules=port)

    raise ValueError(f"Unknown command: {command}")


def render(output: Any) -> Any:
    """Reduce a component output to its JSON result."""
    if isinstance(output, list_utils.ElementOutput):
        return {"found": output.found, "element": to_jsonable(output.element)}
    if isinstance(output, list_utils.MeasureOutput):
        return output.value
    if isinstance(output, list_utils.SplitOutput):
        return [to_jsonable(output.first), to_jsonable(output.second)]
    return to_jsonable(output.items)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="listkit", description="List processing utilities")
    parser.add_argument("--rules", help=f"Rules file (default: {RULES_PATH} if present)")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the logging level from the rules file",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    def with_items(name: str, help_text: str) -> argparse.ArgumentParser:
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("items", type=parse_list, help="JSON list")
        return sub

    # lookups and measures
    with_items("last", "Last element")
    with_items("element_at", "Element at a 1-based position").add_argument(
        "position", type=int
    )
    with_items("length", "Number of top-level elements")
    with_items("is_palindrome", "Whether the list reads the same backwards")

    # transformations
    for name, arg_names in TRANSFORM_ARGS.items():
        sub = with_items(name, name.replace("_", " ").capitalize())
        for arg_name in arg_names:
            sub.add_argument(arg_name, type=int)

    with_items("decode", "Expand [count, element] pairs")
    with_items("split", "Split after COUNT elements").add_argument("count", type=int)
    slice_parser = with_items("slice", "Inclusive 1-based slice")
    slice_parser.add_argument("start", type=int)
    slice_parser.add_argument("end", type=int)
    insert_parser = with_items("insert_at", "Insert ELEMENT before POSITION")
    insert_parser.add_argument("element", type=parse_json, help="JSON value")
    insert_parser.add_argument("position", type=int)

    range_parser = subparsers.add_parser("range", help="Inclusive integer range")
    range_parser.add_argument("start", type=int)
    range_parser.add_argument("finish", type=int)

    # combinatorics
    select_parser = with_items("random_select", "COUNT elements at random")
    select_parser.add_argument("count", type=int)
    permutation_parser = with_items("random_permutation", "Random permutation")
    lotto_parser = subparsers.add_parser("lotto", help="COUNT distinct numbers from 1..MAXIMUM")
    lotto_parser.add_argument("count", type=int)
    lotto_parser.add_argument("maximum", type=int)
    for sub in (select_parser, permutation_parser, lotto_parser):
        sub.add_argument("--seed", type=int, help="Seed for reproducible draws")

    with_items("combinations", "All SIZE-element combinations").add_argument("size", type=int)
    with_items("group", "Partitions into groups of SIZES").add_argument(
        "sizes", type=int, nargs="+"
    )
    with_items("length_sort", "Sort sublists by length")
    with_items("length_frequency_sort", "Sort sublists by length frequency")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        rules = get_rules(args.rules)
    except (FileNotFoundError, ValueError) as e:
        logging.basicConfig(level=logging.WARNING)
        logger.error("Could not load rules: %s", e)
        return EXIT_RULES_ERROR

    logging.basicConfig(level=args.log_level or rules.logging.level)

    output = dispatch(args, rules)
    if not output.success:
        for error in output.errors:
            print(f"error: {error.message} [{error.code}]", file=sys.stderr)
        return EXIT_INVALID_ARGUMENT

    print(json.dumps(render(output)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
