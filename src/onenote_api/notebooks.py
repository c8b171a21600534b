"""Pure traversal helpers over the notebook -> section group -> section tree.

Search is depth-first, roots in list order, and within a container its
sections before its section groups. The first match in that pre-order wins.
Nothing here raises for a missing section: absence is ``[]`` or ``False``.
"""

from collections.abc import Callable, Sequence

from onenote_api.models.hierarchy import HierarchyNode, Notebook, Section, SectionParent

SectionPredicate = Callable[[Section], bool]


def get_depth_of_parent(node: HierarchyNode) -> int:
    """Levels of children below ``node``; 0 for a section or an empty container."""
    if isinstance(node, Section):
        return 0
    children: list[HierarchyNode] = [*node.section_groups, *node.sections]
    if not children:
        return 0
    return 1 + max(get_depth_of_parent(child) for child in children)


def get_depth_of_notebooks(notebooks: Sequence[Notebook]) -> int:
    """Deepest depth across ``notebooks``; 0 when there are none."""
    return max((get_depth_of_parent(notebook) for notebook in notebooks), default=0)


def get_path_from_parent_to_section(
    parent: SectionParent, predicate: SectionPredicate
) -> list[HierarchyNode]:
    """Path ``[parent, ..., section]`` to the first section matching ``predicate``."""
    return _find_path(parent, predicate) or []


def get_path_from_notebooks_to_section(
    notebooks: Sequence[Notebook], predicate: SectionPredicate
) -> list[HierarchyNode]:
    """Path from the first notebook containing a matching section down to it."""
    for notebook in notebooks:
        path = _find_path(notebook, predicate)
        if path:
            return path
    return []


def section_exists_in_parent(parent: SectionParent, section_id: str) -> bool:
    if any(section.id == section_id for section in parent.sections):
        return True
    return any(section_exists_in_parent(group, section_id) for group in parent.section_groups)


def section_exists_in_notebooks(notebooks: Sequence[Notebook], section_id: str) -> bool:
    return any(section_exists_in_parent(notebook, section_id) for notebook in notebooks)


def _find_path(parent: SectionParent, predicate: SectionPredicate) -> list[HierarchyNode] | None:
    for section in parent.sections:
        if predicate(section):
            return [parent, section]
    for group in parent.section_groups:
        path = _find_path(group, predicate)
        if path:
            return [parent, *path]
    return None
