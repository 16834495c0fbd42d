"""
options.py — Long-option extraction for awslite subcommands.

Two ways to pass values to an option, and they are equivalent:
  --registry-ids 012345678910 023456789012 --region eu-west-1
  --registry-ids="012345678910 023456789012" --region=eu-west-1

In the first form, values are every bare token after the flag up to the next
token starting with "--". In the second form the text after "=" is split on
single spaces, so one shell word can carry several values.
"""

# ── Stdlib imports ────────────────────────────────────────────────────────────
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple, Union

from .errors import UsageError

ONE = "one"
MANY = "many"


@dataclass(frozen=True)
class OptionSpec:
    name: str
    arity: str = MANY


# ──────────────────────────────────────────────────────────────────────────────
# get_opt(opt, args) -> (values, found)
# Only the first occurrence of the option counts. A flag followed directly by
# another flag (or the end of args) is found with no values.
# ──────────────────────────────────────────────────────────────────────────────
def get_opt(opt: str, args: Sequence[str]) -> Tuple[List[str], bool]:
    flag = "--" + opt
    inline = flag + "="

    for i, arg in enumerate(args):
        if arg.startswith(inline):
            return arg[len(inline):].split(" "), True

        if arg == flag:
            vals = []
            for nxt in args[i + 1:]:
                if nxt.startswith("--"):
                    break
                vals.append(nxt)
            return vals, True

    return [], False


def _flag_name(token: str) -> str:
    return token[2:].split("=", 1)[0]


def parse_options(schema: Sequence[OptionSpec], args: Sequence[str]) -> Dict[str, Union[str, List[str]]]:
    """
    Parse args against a declarative option schema.

    Returns {name: value} for options present in args; ONE-arity options map to
    a single string, MANY-arity options to a list. Unknown flags, stray
    positional tokens and wrong value counts raise UsageError.
    """
    known = {spec.name: spec for spec in schema}

    # Reject anything the schema does not describe before extracting values.
    expecting_values = False
    for token in args:
        if token.startswith("--"):
            name = _flag_name(token)
            if name not in known:
                raise UsageError(f"unknown option: --{name}")
            expecting_values = "=" not in token
        elif not expecting_values:
            raise UsageError(f"unexpected argument: {token}")

    parsed: Dict[str, Union[str, List[str]]] = {}
    for spec in schema:
        vals, found = get_opt(spec.name, args)
        if not found:
            continue
        if spec.arity == ONE:
            if len(vals) != 1 or not vals[0]:
                raise UsageError(f"--{spec.name} takes exactly one value")
            parsed[spec.name] = vals[0]
        else:
            parsed[spec.name] = vals
    return parsed
