"""
Tests for the traversal helpers.

Fixture tree
------------
0
├── 1 (w=0)
│   ├── 3 (w=0)
│   │   └── 5
│   └── 4 (w=1)
└── 2 (w=1)
"""

from tree_builder import build_tree, find_node, find_path, flatten_tree, walk

RECORDS = [
    {"id": 1, "parent_id": 0, "weight": 0},
    {"id": 2, "parent_id": 0, "weight": 1},
    {"id": 4, "parent_id": 1, "weight": 1},
    {"id": 3, "parent_id": 1, "weight": 0},
    {"id": 5, "parent_id": 3, "label": "leaf"},
]


class TestTraversal:
    def setup_method(self):
        self.roots = build_tree(RECORDS)

    def test_walk_preorder(self):
        assert [(d, n.id) for d, n in walk(self.roots)] == [
            (0, 1),
            (1, 3),
            (2, 5),
            (1, 4),
            (0, 2),
        ]

    def test_walk_empty(self):
        assert list(walk([])) == []

    def test_find_node(self):
        node = find_node(self.roots, 5)
        assert node is not None
        assert node.attributes == {"label": "leaf"}

    def test_find_node_missing(self):
        assert find_node(self.roots, 99) is None

    def test_find_path(self):
        assert [n.id for n in find_path(self.roots, 5)] == [1, 3, 5]

    def test_find_path_root(self):
        assert [n.id for n in find_path(self.roots, 2)] == [2]

    def test_find_path_missing(self):
        assert find_path(self.roots, 99) == []

    def test_flatten_tree(self):
        flat = flatten_tree(self.roots)
        assert [(row["id"], row["depth"]) for row in flat] == [
            (1, 0),
            (3, 1),
            (5, 2),
            (4, 1),
            (2, 0),
        ]
        assert all("children" not in row for row in flat)
        assert flat[2]["label"] == "leaf"

    def test_flatten_leaves_tree_intact(self):
        flatten_tree(self.roots)
        assert [n.id for n in self.roots[0].children] == [3, 4]
