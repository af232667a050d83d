from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema. Tree actions keep the order in which
they were typed, so `--folder a --file a/index.html` builds the folder
before the file.
"""

import argparse
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, Tuple

from webstager.utils.i18n import i18n

ACTION_FOLDER = "folder"
ACTION_FILE = "file"
ACTION_UPLOAD = "upload"
ACTION_DELETE = "delete"


@dataclass(frozen=True)
class TreeAction:
    """One tree action requested on the command line."""
    kind: str
    target: str


class _OrderedAction(argparse.Action):
    """Append (kind, value) to a single shared list to preserve order."""

    def __call__(
            self,
            parser: argparse.ArgumentParser,
            namespace: argparse.Namespace,
            values: Any,
            option_string: Optional[str] = None,
    ) -> None:
        actions = list(getattr(namespace, self.dest, None) or [])
        actions.append(TreeAction(kind=self.const, target=str(values)))
        setattr(namespace, self.dest, actions)


# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the WebStager CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="webstager",
        description=i18n.t("app.description"),
    )

    # --- Tree Actions (ordered) ---
    p.add_argument(
        "--folder",
        dest="actions",
        action=_OrderedAction,
        const=ACTION_FOLDER,
        metavar="PATH",
        help=i18n.t("cli.args.folder"),
    )
    p.add_argument(
        "--file",
        dest="actions",
        action=_OrderedAction,
        const=ACTION_FILE,
        metavar="PATH",
        help=i18n.t("cli.args.file"),
    )
    p.add_argument(
        "--upload",
        dest="actions",
        action=_OrderedAction,
        const=ACTION_UPLOAD,
        metavar="PARENT=LOCAL_PATH[,LOCAL_PATH...]",
        help=i18n.t("cli.args.upload"),
    )
    p.add_argument(
        "--delete",
        dest="actions",
        action=_OrderedAction,
        const=ACTION_DELETE,
        metavar="PATH",
        help=i18n.t("cli.args.delete"),
    )

    # --- Behaviour ---
    p.add_argument("--counter-ids", action="store_true", help=i18n.t("cli.args.ids"))
    p.add_argument("--summary", action="store_true", help=i18n.t("cli.args.summary"))
    p.add_argument("--strict", action="store_true", help=i18n.t("cli.args.strict"))
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the saved configuration and use built-in defaults.",
    )
    p.add_argument("--debug", action="store_true", help=i18n.t("cli.args.debug"))

    p.set_defaults(actions=[])
    return p


# -----------------------------------------------------------------------------
# ARGUMENT PARSING HELPERS
# -----------------------------------------------------------------------------

def split_path(path: str) -> Tuple[str, str]:
    """
    Split 'a/b/c' into ('a/b', 'c').

    Returns:
        Tuple[str, str]: Parent path ('' for the root) and leaf name.
    """
    parts = [s for s in path.strip().split("/") if s.strip()]
    if not parts:
        return "", ""
    return "/".join(parts[:-1]), parts[-1].strip()


def parse_upload_target(value: str) -> Tuple[str, List[str]]:
    """
    Parse 'PARENT=LOCAL[,LOCAL...]'.

    A parent of '.' or '' means the forest root. A value without '='
    uploads into the root.

    Returns:
        Tuple[str, List[str]]: Parent path and local file paths.
    """
    if "=" in value:
        parent, _, locals_part = value.partition("=")
    else:
        parent, locals_part = "", value

    parent = parent.strip()
    if parent == ".":
        parent = ""
    return parent, [p.strip() for p in locals_part.split(",") if p.strip()]


def describe_actions(actions: Sequence[TreeAction]) -> List[str]:
    return [f"--{a.kind} {a.target}" for a in actions]
