from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Stages a forest from an ordered list of actions and prints the resulting
tree. The CLI plays the host role: it owns the forest and feeds every
change reported by the editor back into it.
"""

import sys
from typing import Dict, List, Optional, Tuple

from webstager.core.editor.tree_editor import TreeEditor
from webstager.core.services.validator import validate_config
from webstager.core.tree.identifiers import IdGenerator
from webstager.core.tree.queries import count_nodes, find_by_path
from webstager.core.tree.renderer import forest_to_lines
from webstager.domain.config import get_default_config, load_config
from webstager.domain.edit_models import EditStatus
from webstager.domain.tree_models import FILE, FOLDER, FolderNode, Forest
from webstager.infra.fs import upload_items_from_paths
from webstager.infra.logging import LoggingConfig, configure_logging, get_logger
from webstager.interface.cli import args as cli_args
from webstager.utils.i18n import i18n

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: 0 on success, 2 if `--strict` is set and an action was ignored.
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    configure_logging(LoggingConfig(level="DEBUG" if args.debug else "WARNING", console=True))

    raw_conf = get_default_config() if args.use_defaults else load_config()
    conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    strategy = "counter" if args.counter_ids else conf["id_strategy"]
    logger.debug(f"CLI actions: {cli_args.describe_actions(args.actions)}")

    forest, rejections = run_actions(args.actions, IdGenerator(strategy))

    for action, status in rejections:
        print(
            i18n.t(
                "cli.status.rejected",
                action=f"--{action.kind}",
                target=action.target,
                status=status.value,
            ),
            file=sys.stderr,
        )

    lines = forest_to_lines(forest)
    print("\n".join(lines) if lines else i18n.t("cli.status.empty"))

    if args.summary:
        folders, files = count_nodes(forest)
        print(i18n.t("cli.status.summary", folders=folders, files=files))

    return 2 if (args.strict and rejections) else 0


# -----------------------------------------------------------------------------
# ACTION EXECUTION
# -----------------------------------------------------------------------------

def run_actions(
        actions: List[cli_args.TreeAction],
        id_generator: IdGenerator,
) -> Tuple[Forest, List[Tuple[cli_args.TreeAction, EditStatus]]]:
    """
    Apply CLI actions in order through a TreeEditor.

    Args:
        actions: Ordered actions as parsed from the command line.
        id_generator: Identifier source for the session.

    Returns:
        Tuple: Final forest and the actions that were ignored with their status.
    """
    host: Dict[str, Forest] = {"forest": ()}

    def on_change(new_forest: Forest) -> None:
        host["forest"] = new_forest

    editor = TreeEditor(host["forest"], on_change, id_generator)
    rejections: List[Tuple[cli_args.TreeAction, EditStatus]] = []

    for action in actions:
        status = _apply(editor, action)
        if status is not EditStatus.APPLIED:
            rejections.append((action, status))

    return host["forest"], rejections


def _apply(editor: TreeEditor, action: cli_args.TreeAction) -> EditStatus:
    if action.kind == cli_args.ACTION_DELETE:
        node = find_by_path(editor.forest, action.target)
        if node is None:
            return EditStatus.NODE_NOT_FOUND
        return editor.delete(node.id).status

    if action.kind == cli_args.ACTION_UPLOAD:
        parent_path, local_paths = cli_args.parse_upload_target(action.target)
        found, parent_id = _resolve_parent(editor.forest, parent_path)
        if not found:
            return EditStatus.TARGET_NOT_FOUND
        return editor.upload_files(parent_id, upload_items_from_paths(local_paths)).status

    parent_path, name = cli_args.split_path(action.target)
    found, parent_id = _resolve_parent(editor.forest, parent_path)
    if not found:
        return EditStatus.TARGET_NOT_FOUND
    kind = FOLDER if action.kind == cli_args.ACTION_FOLDER else FILE
    return editor.create(kind, parent_id, name).status


def _resolve_parent(forest: Forest, parent_path: str) -> Tuple[bool, Optional[str]]:
    """
    Map a parent path to a folder id.

    Returns:
        Tuple[bool, Optional[str]]: (resolved, folder id or None for root).
    """
    if not parent_path:
        return True, None
    node = find_by_path(forest, parent_path)
    if not isinstance(node, FolderNode):
        return False, None
    return True, node.id
