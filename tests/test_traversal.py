"""Tests for paths, adapter ordering, traversers, collectors and rendering."""

import sys
import unittest
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from treefs import NamespaceTree, NamespaceConfig, SiblingOrder, NodeKind
from treefs.api import count_nodes, traverse_tree, collect_tree_data, find_nodes
from treefs.core import (
    NamespaceAdapter,
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
    PathCollector,
    CustomCollector,
    create_traverser,
)
from treefs.paths import absolute_path, join_path, split_path


def create_test_tree(config=None) -> NamespaceTree:
    """Create a test namespace.

    Structure:
    /
    ├── dir1/
    │   ├── subdir1/
    │   │   └── file5.txt
    │   └── file3.txt
    ├── dir2/
    │   └── file6.txt
    ├── file1.txt
    └── file2.py
    """
    tree = NamespaceTree(config)
    tree.create_file("file1.txt", "content1")
    tree.create_file("file2.py", "# python file")
    tree.create_directory("dir1")
    tree.create_directory("dir2")
    tree.change_directory("dir1")
    tree.create_file("file3.txt", "content3")
    tree.create_directory("subdir1")
    tree.change_directory("subdir1")
    tree.create_file("file5.txt", "content5")
    tree.change_directory("/")
    tree.change_directory("dir2")
    tree.create_file("file6.txt", "content6")
    tree.change_directory("/")
    return tree


class TestPaths(unittest.TestCase):

    def test_absolute_path(self):
        tree = create_test_tree()
        node = tree.lookup("/dir1/subdir1/file5.txt")
        self.assertEqual(absolute_path(node), "/dir1/subdir1/file5.txt")
        self.assertEqual(absolute_path(tree.root), "/")
        self.assertEqual(tree.path_of(node), node.identifier())

    def test_join_path(self):
        self.assertEqual(join_path("/", "a"), "/a")
        self.assertEqual(join_path("/a", "b"), "/a/b")

    def test_split_path(self):
        self.assertEqual(split_path("/"), [])
        self.assertEqual(split_path("/a/b"), ["a", "b"])
        self.assertIsNone(split_path("a/b"))
        self.assertIsNone(split_path("/a/"))


class TestAdapterOrdering(unittest.TestCase):

    def names(self, order):
        tree = create_test_tree(NamespaceConfig(sibling_order=order))
        return [child.name for child in tree.adapter.get_children(tree.root)]

    def test_directories_first(self):
        self.assertEqual(self.names(SiblingOrder.DIRECTORIES_FIRST),
                         ["dir1", "dir2", "file1.txt", "file2.py"])

    def test_alphabetical(self):
        tree = NamespaceTree(NamespaceConfig(sibling_order=SiblingOrder.ALPHABETICAL))
        for name in ["b", "c.txt", "a.txt"]:
            tree.create_file(name)
        tree.create_directory("bb")
        self.assertEqual([c.name for c in tree.adapter.get_children(tree.root)],
                         ["a.txt", "b", "bb", "c.txt"])

    def test_insertion(self):
        self.assertEqual(self.names(SiblingOrder.INSERTION),
                         ["file1.txt", "file2.py", "dir1", "dir2"])

    def test_depth_and_siblings(self):
        tree = create_test_tree()
        adapter = tree.adapter
        file5 = tree.lookup("/dir1/subdir1/file5.txt")
        dir1 = tree.lookup("/dir1")

        self.assertEqual(adapter.get_depth(file5), 3)
        self.assertEqual(adapter.get_depth(tree.root), 0)
        self.assertEqual([s.name for s in adapter.get_siblings(dir1)],
                         ["dir2", "file1.txt", "file2.py"])
        self.assertTrue(adapter.is_last_sibling(tree.lookup("/file2.py")))
        self.assertFalse(adapter.is_last_sibling(dir1))
        self.assertEqual(adapter.subtree_size(tree.root), 9)


class TestTraversers(unittest.TestCase):

    def setUp(self):
        self.tree = create_test_tree()
        self.adapter = self.tree.adapter

    def paths(self, traverser, **kwargs):
        return [absolute_path(n) for n, _ in traverser.traverse(self.tree.root, **kwargs)]

    def test_pre_order(self):
        self.assertEqual(self.paths(DepthFirstPreOrderTraverser(self.adapter)), [
            "/", "/dir1", "/dir1/subdir1", "/dir1/subdir1/file5.txt", "/dir1/file3.txt",
            "/dir2", "/dir2/file6.txt", "/file1.txt", "/file2.py",
        ])

    def test_post_order_children_before_parent(self):
        order = self.paths(DepthFirstPostOrderTraverser(self.adapter))
        self.assertEqual(order[-1], "/")
        self.assertLess(order.index("/dir1/subdir1/file5.txt"), order.index("/dir1/subdir1"))
        self.assertLess(order.index("/dir1/subdir1"), order.index("/dir1"))
        self.assertEqual(len(order), 9)

    def test_breadth_first_levels(self):
        depths = [d for _, d in BreadthFirstTraverser(self.adapter).traverse(self.tree.root)]
        self.assertEqual(depths, sorted(depths))

    def test_depth_limits(self):
        pre = DepthFirstPreOrderTraverser(self.adapter)
        self.assertEqual(len(self.paths(pre, max_depth=1)), 5)
        self.assertEqual(len(self.paths(pre, min_depth=3)), 1)

    def test_deep_tree_does_not_hit_recursion_limit(self):
        tree = NamespaceTree()
        for i in range(sys.getrecursionlimit() + 50):
            tree.create_directory(f"d{i}")
            tree.change_directory(f"d{i}")
        tree.create_file("bottom.txt")

        self.assertEqual(len(tree.search("bottom")), 1)
        self.assertEqual(tree.stats().file_count, 1)

    def test_create_traverser(self):
        self.assertIsInstance(create_traverser("dfs_post", self.adapter), DepthFirstPostOrderTraverser)
        self.assertIsInstance(create_traverser("BFS", self.adapter), BreadthFirstTraverser)
        with self.assertRaises(ValueError):
            create_traverser("sideways", self.adapter)


class TestApiHelpers(unittest.TestCase):

    def test_count_and_find(self):
        tree = create_test_tree()
        self.assertEqual(count_nodes(tree.root, tree.adapter), 9)
        py_files = list(find_nodes(tree.root, tree.adapter, lambda n: n.name.endswith(".py")))
        self.assertEqual([n.name for n in py_files], ["file2.py"])

    def test_collect_with_collectors(self):
        tree = create_test_tree()
        paths = [data for _, data in collect_tree_data(
            tree.root, tree.adapter, PathCollector(tree.adapter), max_depth=1)]
        self.assertEqual(paths[0], "/")
        self.assertIn("/dir2", paths)

        depths = CustomCollector(tree.adapter, lambda node, depth: (node.name, depth))
        collected = dict(data for _, data in collect_tree_data(
            tree.root, tree.adapter, depths, strategy="bfs"))
        self.assertEqual(collected["file5.txt"], 3)

    def test_traverse_accepts_traverser_instance(self):
        tree = create_test_tree()
        traverser = DepthFirstPostOrderTraverser(tree.adapter)
        nodes = [n for n, _ in traverse_tree(tree.root, tree.adapter, strategy=traverser)]
        self.assertIs(nodes[-1], tree.root)


class TestRender(unittest.TestCase):

    def test_rows_in_pre_order_with_positions(self):
        tree = create_test_tree()
        tree.change_directory("dir1")
        rows = tree.render()

        self.assertEqual([r.path for r in rows][:4],
                         ["/", "/dir1", "/dir1/subdir1", "/dir1/subdir1/file5.txt"])
        by_path = {r.path: r for r in rows}

        root = by_path["/"]
        self.assertEqual(root.depth, 0)
        self.assertEqual(root.kind, NodeKind.DIRECTORY)
        self.assertIsNone(root.size)

        self.assertTrue(by_path["/dir1"].is_cursor)
        self.assertEqual(sum(r.is_cursor for r in rows), 1)

        self.assertTrue(by_path["/file2.py"].is_last)
        self.assertFalse(by_path["/dir1"].is_last)
        self.assertEqual(by_path["/file1.txt"].size, len("content1"))

        deep = by_path["/dir1/subdir1/file5.txt"]
        self.assertEqual(deep.depth, 3)
        self.assertEqual(deep.ancestors_last, (False, False))
        self.assertEqual(by_path["/dir2/file6.txt"].ancestors_last, (False,))

    def test_render_depth_limit(self):
        tree = create_test_tree()
        self.assertEqual(len(tree.render(max_depth=1)), 5)

    def test_render_collector_outside_walk(self):
        from treefs.core import RenderCollector
        tree = create_test_tree()
        node = tree.lookup("/dir1/subdir1/file5.txt")
        row = RenderCollector(tree.adapter).collect(node, 3)
        walked = {r.path: r for r in tree.render()}[row.path]
        self.assertEqual(row, walked)


if __name__ == "__main__":
    unittest.main()
