from huffman_tree import Branch, Leaf, freq_of, traverse


def test_freq_of_both_node_kinds():
	assert freq_of(Leaf("a", 3)) == 3
	assert freq_of(Branch(7, Leaf("a", 3), Leaf("b", 4))) == 7


def test_traverse_records_paths():
	tree = Branch(7, Leaf("b", 3), Branch(4, Leaf("a", 2), Leaf("c", 2)))
	assert traverse(tree) == {
		"b": [False],
		"a": [True, False],
		"c": [True, True],
	}


def test_traverse_lone_leaf_gives_empty_code():
	assert traverse(Leaf("a", 3)) == {"a": []}


def test_traverse_codes_are_independent_lists():
	codes = traverse(Branch(2, Leaf("a", 1), Leaf("b", 1)))
	codes["a"].append(True)
	assert codes["b"] == [True]


def test_traverse_skips_absent_children():
	tree = Branch(0, None, Branch(0, Leaf("a", 0), None))
	assert traverse(tree) == {"a": [True, False]}
