import pytest

from algobox.trees import ListNode, TreeNode, decimal_value, flatten, minimum_score


def preorder(node):
    if node is None:
        return []
    return [node.val, *preorder(node.left), *preorder(node.right)]


def right_chain(node):
    values = []
    while node is not None:
        assert node.left is None
        values.append(node.val)
        node = node.right
    return values


def linked(bits):
    head = None
    for bit in reversed(bits):
        head = ListNode(bit, head)
    return head


def test_flatten_follows_preorder():
    root = TreeNode(
        1,
        TreeNode(2, TreeNode(3), TreeNode(4)),
        TreeNode(5, None, TreeNode(6)),
    )
    expected = preorder(root)
    flatten(root)
    assert right_chain(root) == expected


def test_flatten_deep_left_spine():
    root = TreeNode(0)
    node = root
    for value in range(1, 1500):
        node.left = TreeNode(value)
        node = node.left
    flatten(root)
    assert right_chain(root) == list(range(1500))


def test_flatten_single_node_keeps_value():
    root = TreeNode(7)
    flatten(root)
    assert root == TreeNode(7)


@pytest.mark.parametrize("bits", ["1", "0", "101", "1101001", "0001", "1" * 30])
def test_decimal_value_matches_binary(bits):
    assert decimal_value(linked([int(b) for b in bits])) == int(bits, 2)


def test_decimal_value_empty_list():
    assert decimal_value(None) == 0


def test_minimum_score_first_example():
    assert minimum_score([1, 5, 5, 4, 11], [[0, 1], [1, 2], [1, 3], [3, 4]]) == 9


def test_minimum_score_second_example():
    assert minimum_score([5, 5, 2, 4, 4, 2], [[0, 1], [1, 2], [5, 2], [4, 3], [1, 3]]) == 0


def test_minimum_score_three_node_path_splits_into_singletons():
    nums = [3, 12, 6]
    assert minimum_score(nums, [[0, 1], [1, 2]]) == max(nums) - min(nums)


def test_minimum_score_ignores_edge_orientation():
    nums = [1, 5, 5, 4, 11]
    edges = [[0, 1], [1, 2], [1, 3], [3, 4]]
    flipped = [[b, a] for a, b in edges]
    assert minimum_score(nums, edges) == minimum_score(nums, flipped)


@pytest.mark.parametrize("nums,edges", [([4], []), ([4, 9], [[0, 1]])])
def test_minimum_score_needs_three_nodes(nums, edges):
    with pytest.raises(ValueError):
        minimum_score(nums, edges)