import pytest

from dddplayer.directory import (
    NodeNotFoundError,
    TreeNode,
    build_directory_tree,
    find_common_root_directory,
    walk,
)


def _walk_tree():
    root = TreeNode("root")
    root.children["folder1"] = TreeNode("folder1")
    root.children["folder2"] = TreeNode("folder2", value="folder2_value")
    root.children["folder3"] = TreeNode("folder3")
    root.children["folder1"].children["subfolder"] = TreeNode("subfolder", value="subfolder_value")
    return root


def test_build_directory_tree():
    root = build_directory_tree(
        [
            "/path/to/file1.txt",
            "/path/to/file2.txt",
            "/path/to/nested/file3.txt",
            "/path/to/nested/file4.txt",
        ]
    )
    assert root.name == "/path/to"
    assert list(root.children) == ["nested"]
    assert root.children["nested"].name == "nested"


def test_find_common_root_directory():
    paths = [
        "/path/to/file1.txt",
        "/path/to/file2.txt",
        "/path/to/nested/file3.txt",
        "/path/to/nested/file4.txt",
        "/path/file5.txt",
    ]
    assert find_common_root_directory(paths) == "/path"


def test_find_common_root_directory_empty():
    assert find_common_root_directory([]) == ""


def test_add_path():
    node = TreeNode("/path/to")
    node.add_path("nested")
    assert list(node.children) == ["nested"]
    node.add_path("nested/deeper/leaf")
    assert node.get_node("nested/deeper/leaf").name == "leaf"


def test_add_value():
    root = TreeNode("github.com/dddplayer/markdown")
    child = TreeNode("child")
    root.children["child"] = child

    with pytest.raises(NodeNotFoundError, match="node not found: nonexistent"):
        root.add_value("nonexistent", "value")

    root.add_value("child", "child_value")
    assert child.value == "child_value"


def test_add_value_recursive():
    root = TreeNode("root")
    child1 = TreeNode("child1")
    child2 = TreeNode("child2")
    child3 = TreeNode("child3")
    root.children["child1"] = child1
    child1.children["child2"] = child2
    child2.children["child3"] = child3

    root.add_value("child1/child2/child3", "recursive_value")
    assert child1.children["child2"].children["child3"].value == "recursive_value"


def test_get_value():
    root = TreeNode("root")
    root.children["folder1"] = TreeNode("folder1")
    root.children["folder2"] = TreeNode("folder2", value="folder2_value")

    assert root.get_value("folder2") == "folder2_value"
    with pytest.raises(NodeNotFoundError) as info:
        root.get_value("folder3/file2.txt")
    assert str(info.value) == "node not found: folder3/file2.txt"
    with pytest.raises(NodeNotFoundError) as info:
        root.get_value("")
    assert str(info.value) == "node not found: "
    assert root.get_value("folder1") is None


def test_get_node():
    root = TreeNode("root")
    root.children["folder1"] = TreeNode("folder1")
    root.children["folder2"] = TreeNode("folder2", value="folder2_value")

    assert root.get_node("folder2").value == "folder2_value"
    assert root.get_node("folder3/file2.txt") is None
    assert root.get_node("") is None
    folder1 = root.get_node("folder1")
    assert folder1 is root.children["folder1"]
    assert folder1.value is None


def test_walk():
    visited = []
    walk(_walk_tree(), lambda directory, value: visited.append(directory))
    assert sorted(visited) == [
        "root",
        "root/folder1",
        "root/folder1/subfolder",
        "root/folder2",
        "root/folder3",
    ]


def test_walk_passes_values():
    values = {}
    walk(_walk_tree(), lambda directory, value: values.__setitem__(directory, value))
    assert values["root/folder2"] == "folder2_value"
    assert values["root/folder1/subfolder"] == "subfolder_value"
    assert values["root"] is None


def test_walk_absolute_root():
    root = build_directory_tree(["/path/to/a.txt", "/path/to/nested/b.txt"])
    visited = []
    walk(root, lambda directory, value: visited.append(directory))
    assert visited == ["/path/to", "/path/to/nested"]