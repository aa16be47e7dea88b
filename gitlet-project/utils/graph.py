# What it does: Keeps the commit history as an append-only graph of immutable commits and answers every history query (lookup, short ids, ancestry, split points)
# How it does: Commits live in an arena keyed by their id and point at their parent by id only. Children are never stored on a commit; they live in a separate index that only ever grows. A commit's id is the object-store hash of its serialized record, so it is a pure function of parent, timestamp, snapshot and message
# What data structure it uses: Directed Acyclic Graph (DAG) of ids, Hash Table (id -> Commit arena, id -> children index), Set (membership test during the split point search)

import time
from dataclasses import dataclass, field
from types import MappingProxyType

from . import objects
from .errors import AmbiguousOrUnknownId, EmptyMessage, NoChanges, UnknownCommit

INITIAL_MESSAGE = "initial commit"


@dataclass(frozen=True)
class Commit:
    """An immutable snapshot node in the history graph.

    Equality and hashing use the id alone; the id covers every other field.
    The snapshot is a read-only mapping.
    """

    id: str
    parent: str | None = field(compare=False)
    message: str = field(compare=False)
    timestamp: int = field(compare=False)
    snapshot: MappingProxyType = field(default_factory=dict, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "snapshot", MappingProxyType(dict(sorted(self.snapshot.items()))))

    @classmethod
    def build(cls, parent, message, timestamp, snapshot):
        record = serialize_commit(parent, message, timestamp, snapshot)
        return cls(objects.compute_hash(record, 'commit'), parent, message, timestamp, snapshot)

    def to_record(self):
        return serialize_commit(self.parent, self.message, self.timestamp, self.snapshot)


def serialize_commit(parent, message, timestamp, snapshot):
    lines = []
    if parent:
        lines.append(f'parent {parent}')
    lines.append(f'timestamp {timestamp}')
    for path, hash_val in sorted(snapshot.items()):
        lines.append(f'file {hash_val} {path}')
    lines.append('')
    lines.append(message)
    return '\n'.join(lines).encode()


def parse_commit(commit_id, content):
    """Rebuilds a Commit from its stored record, checking the id matches."""
    header, _, message = content.decode().partition('\n\n')
    parent = None
    timestamp = 0
    snapshot = {}
    for line in header.splitlines():
        key, _, value = line.partition(' ')
        if key == 'parent':
            parent = value
        elif key == 'timestamp':
            timestamp = int(value)
        elif key == 'file':
            hash_val, path = value.split(' ', 1)
            snapshot[path] = hash_val

    commit = Commit.build(parent, message, timestamp, snapshot)
    if commit.id != commit_id:
        raise ValueError(f"Commit record {commit_id} does not match its content")
    return commit


class CommitGraph:
    """Arena of commits indexed by id, plus an append-only children index."""

    def __init__(self, clock=time.time):
        self._commits = {}
        self._children = {}
        self._clock = clock
        self._last_timestamp = 0
        self.root = None

    @classmethod
    def initial(cls, clock=time.time):
        graph = cls(clock)
        graph.add(Commit.build(None, INITIAL_MESSAGE, graph._next_timestamp(), {}))
        return graph

    def __contains__(self, commit_id):
        return commit_id in self._commits

    def __len__(self):
        return len(self._commits)

    def _next_timestamp(self):
        # Never step backwards within one process, even if the wall clock does
        self._last_timestamp = max(int(self._clock()), self._last_timestamp)
        return self._last_timestamp

    def add(self, commit): # Registers an existing commit (root or loaded from disk) and links it to its parent
        if commit.id in self._commits:
            return commit
        if commit.parent is None:
            if self.root is not None:
                raise ValueError(f"Second root commit: {commit.id}")
            self.root = commit.id
        elif commit.parent not in self._commits:
            raise UnknownCommit(f"Parent {commit.parent} of {commit.id} is not in the graph")
        else:
            self._children[commit.parent].append(commit.id)

        self._commits[commit.id] = commit
        self._children[commit.id] = []
        return commit

    def create_commit(self, parent_id, message, snapshot, removals=()):
        if not message or not message.strip():
            raise EmptyMessage()
        parent = self.lookup(parent_id)
        if dict(snapshot) == dict(parent.snapshot) and not removals:
            raise NoChanges()

        commit = Commit.build(parent_id, message, self._next_timestamp(), snapshot)
        return self.add(commit)

    def lookup(self, commit_id):
        try:
            return self._commits[commit_id]
        except KeyError:
            raise UnknownCommit() from None

    def commits(self): # All commits in creation order
        return list(self._commits.values())

    def children(self, commit_id):
        self.lookup(commit_id)
        return tuple(self._children[commit_id])

    def resolve_short_id(self, prefix):
        if not prefix:
            raise AmbiguousOrUnknownId()
        if prefix in self._commits:
            return prefix
        matches = [commit_id for commit_id in self._commits if commit_id.startswith(prefix)]
        if len(matches) != 1:
            raise AmbiguousOrUnknownId()
        return matches[0]

    def find(self, message):
        return [commit.id for commit in self._commits.values() if commit.message == message]

    def history(self, commit_id): # The commit itself followed by its ancestors, nearest first
        chain = []
        current = commit_id
        while current is not None:
            commit = self.lookup(current)
            chain.append(commit)
            current = commit.parent
        return chain

    def ancestors(self, commit_id):
        return [commit.id for commit in self.history(commit_id)[1:]]

    def is_ancestor(self, ancestor_id, commit_id): # True if ancestor_id is commit_id or lies on its parent chain
        return any(commit.id == ancestor_id for commit in self.history(commit_id))

    def split_point(self, first_id, second_id):
        """Returns the nearest common ancestor of two heads, or None.

        Each head's parent chain is collected (without the head itself) and the
        shorter chain is scanned, nearest first, against the longer one. Every
        commit has at most one parent, so the first hit is the lowest common
        ancestor. History introduced by earlier merges is not followed.
        """
        first = self.ancestors(first_id)
        second = self.ancestors(second_id)
        shorter, longer = (first, second) if len(first) <= len(second) else (second, first)

        longer_set = set(longer)
        for commit_id in shorter:
            if commit_id in longer_set:
                return self._commits[commit_id]
        return None
