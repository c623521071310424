"""Comment threading: turn a flat, oldest-first list into nested replies."""

MAX_DEPTH = 5


def build_comment_tree(comments, max_depth=MAX_DEPTH):
    """Nest ``comments`` under their parents.

    Returns the top-level nodes, each a dict with ``comment``, ``depth``
    (top level is 1) and ``replies``. A reply whose parent already sits at
    ``max_depth`` is attached one level up, next to its parent, so no node
    is deeper than ``max_depth``. Replies whose parent is not in the list
    are treated as top-level.
    """
    nodes = {}
    roots = []

    for comment in sorted(comments, key=lambda c: c.created_at):
        anchor = nodes.get(str(comment.parent_comment_id)) if comment.parent_comment_id else None
        while anchor is not None and anchor["depth"] >= max_depth:
            anchor = anchor["parent"]

        node = {
            "comment": comment,
            "depth": anchor["depth"] + 1 if anchor else 1,
            "parent": anchor,
            "replies": [],
        }
        nodes[str(comment.id)] = node
        (anchor["replies"] if anchor else roots).append(node)

    return roots
