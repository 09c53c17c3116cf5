"""This module represents the implementation of a radix tree (a compressed
trie) that's used for fast checking for the existence of a string.

Every edge carries a whole string instead of a single character, and no
two edges leaving the same node start with the same character, so shared
prefixes of the stored words are kept only once.
"""

LEAF_SYMBOL = "Ø"
EMPTY_LABEL_SYMBOL = "λ"


def common_prefix_length(first: str, second: str) -> int:
    """Return the length of the longest common prefix of two strings."""
    length = 0
    limit = min(len(first), len(second))
    while length < limit and first[length] == second[length]:
        length += 1
    return length


class RadixNode:
    """Represent a node in the radix tree structure."""

    __slots__ = ("edges",)

    def __init__(self) -> None:
        """Initialize a new radix node.

        Attributes:
            edges (dict): A dictionary mapping edge labels to the
            RadixNode instances they lead to. An empty label marks
            that the path reaching this node is a complete word.

        """
        self.edges: dict[str, RadixNode] = {}

    def is_leaf(self) -> bool:
        """Check whether the node has no outgoing edges.

        Returns:
            bool: True if a stored word ends exactly here
            with nothing below it, False otherwise.

        """
        return not self.edges

    def insert(self, word: str) -> None:
        """Insert a word below this node, splitting edges as needed.

        Args:
            word (str): The (remaining) word to be inserted.

        """
        leading_label = ""
        root_length = 0

        # First edge with the longest common prefix wins
        for label in self.edges:
            length = common_prefix_length(label, word)
            if length > root_length:
                leading_label = label
                root_length = length

        if root_length == 0:
            # Nothing shares a first character with the word
            self.edges.setdefault(word, RadixNode())
            return

        successor = self.edges[leading_label]

        if root_length == len(leading_label):
            remainder = word[root_length:]
            if remainder:
                if successor.is_leaf():
                    # Keep the shorter word that used to end here
                    successor.insert("")
                successor.insert(remainder)
            elif not successor.is_leaf():
                successor.insert("")
            return

        branch = RadixNode()
        branch.edges[word[root_length:]] = RadixNode()
        branch.edges[leading_label[root_length:]] = successor
        self._replace_edge(leading_label, word[:root_length], branch)

    def contains(self, word: str) -> bool:
        """Check for the existence of a word below this node.

        Args:
            word (str): The (remaining) word to search for.

        Returns:
            bool: True if the exact `word` is stored below
            this node as a complete word, False otherwise.

        """
        exact = self.edges.get(word)
        if exact is not None:
            return exact.is_leaf() or exact.contains("")

        best_label = ""
        for label in self.edges:
            if len(label) > len(best_label) and word.startswith(label):
                best_label = label

        if not best_label:
            return False
        return self.edges[best_label].contains(word[len(best_label):])

    def _replace_edge(
        self,
        old_label: str,
        new_label: str,
        successor: "RadixNode",
    ) -> None:
        """Swap an edge for another one without moving its position."""
        self.edges = {
            (new_label if label == old_label else label): (
                successor if label == old_label else node
            )
            for label, node in self.edges.items()
        }

    def __str__(self) -> str:
        """Render the node and everything below it.

        Returns:
            str: `Ø` for a leaf, otherwise the edges in braces.

        """
        if self.is_leaf():
            return LEAF_SYMBOL
        rendered = ", ".join(
            f"{_render_label(label)} → {node}"
            for label, node in self.edges.items()
        )
        return f"{{{rendered}}}"


def _render_label(label: str) -> str:
    """Quote an edge label, or show `λ` for the empty one.

    Args:
        label (str): The edge label to render.

    Returns:
        str: The rendered label.

    """
    return f'"{label}"' if label else EMPTY_LABEL_SYMBOL


class RadixTree:
    """Represents the radix tree data structure."""

    def __init__(self) -> None:
        """Initialize the root node of the radix tree."""
        self.root = RadixNode()

    @property
    def edges(self) -> dict[str, RadixNode]:
        """The edges leaving the root, keyed by label."""
        return self.root.edges

    def insert(self, word: str) -> None:
        """Insert a new word into the radix tree structure.

        Inserting a word that is already stored leaves the tree
        unchanged.

        Args:
            word (str): The word to be inserted into the tree.

        """
        self.root.insert(word)

    def contains(self, word: str) -> bool:
        """Check for the existence of a given word in the radix tree.

        Args:
            word (str): The word to search for in the tree.

        Returns:
            bool: True if the exact `word` is present
            in the tree as a complete word, False otherwise.

        """
        return self.root.contains(word)

    def is_leaf(self) -> bool:
        """Check whether the tree holds no edges at all."""
        return self.root.is_leaf()

    def __contains__(self, word: object) -> bool:
        """Support the `in` operator.

        Args:
            word (object): The value to look up.

        Returns:
            bool: True if `word` is a string stored in the tree.

        """
        return isinstance(word, str) and self.contains(word)

    def __str__(self) -> str:
        """Render the whole tree, see RadixNode.__str__.

        Returns:
            str: The rendered root node.

        """
        return str(self.root)

    def __repr__(self) -> str:
        """Return a string representation of the tree.

        Returns:
            str: The rendered tree wrapped in `RadixTree(...)`.

        """
        return f"RadixTree({self.root})"
