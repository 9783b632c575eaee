from huffman_queue import PQueue
from huffman_tree import Branch, Leaf


def test_dequeue_empty_returns_none():
	queue = PQueue()
	assert queue.dequeue() is None
	assert queue.size() == 0


def test_dequeues_in_ascending_frequency():
	queue = PQueue()
	for node in (Leaf("x", 3), Leaf("y", 1), Leaf("z", 2)):
		queue.enqueue(node)
	assert queue.size() == 3
	assert [queue.dequeue().symbol for _ in range(3)] == ["y", "z", "x"]
	assert queue.dequeue() is None


def test_equal_frequencies_leave_in_arrival_order():
	queue = PQueue()
	a = Leaf("A", 1)
	b = Leaf("B", 1)
	queue.enqueue(a)
	queue.enqueue(b)
	assert queue.dequeue() is a
	assert queue.dequeue() is b


def test_branch_queues_behind_leaves_of_equal_frequency():
	queue = PQueue()
	leaf = Leaf("a", 4)
	branch = Branch(4, Leaf("b", 2), Leaf("c", 2))
	queue.enqueue(Leaf("d", 5))
	queue.enqueue(leaf)
	queue.enqueue(branch)
	assert len(queue) == 3
	assert queue.dequeue() is leaf
	assert queue.dequeue() is branch
	assert queue.dequeue().symbol == "d"
