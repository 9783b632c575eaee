# filename: huffman_queue.py

from huffman_tree import freq_of


class PQueue:
    """Nodes kept in ascending order of frequency, lowest first.

    Nodes of equal frequency leave the queue in the order they entered it.
    """

    def __init__(self):
        self.queue = []

    def enqueue(self, node):
        freq = freq_of(node)
        for i, queued in enumerate(self.queue):
            if freq < freq_of(queued):
                self.queue.insert(i, node)
                return
        self.queue.append(node)

    def dequeue(self):
        return self.queue.pop(0) if self.queue else None

    def size(self):
        return len(self.queue)

    def __len__(self):
        return self.size()
