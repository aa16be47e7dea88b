# What it does: Holds the staging area (the next commit's proposed changes) and reads/writes it to the .gitlet/index and .gitlet/pending files
# How it does: Staging a path hashes the working copy; changed content is written to the object store as a blob and recorded, content identical to HEAD is recorded as "clean" instead of staged
# What data structure it uses: Dictionary (mapping file paths to blob hashes), Set (clean paths and the pending removal/untracked paths)

import os
from . import objects, workdir

PENDING_KINDS = ('clean', 'removed', 'untracked')


class StagingArea:
    """Pending blob digests for paths added since the last commit.

    ``clean`` holds paths that were re-added with exactly the content HEAD
    already tracks. They are not staged, but they still count as activity
    for the next commit.
    """

    def __init__(self, repo_root, entries=None, clean=None):
        self.repo_root = repo_root
        self.entries = dict(entries or {})
        self.clean = set(clean or ())

    def __contains__(self, path):
        return path in self.entries

    def __len__(self):
        return len(self.entries)

    def get(self, path):
        return self.entries.get(path)

    def is_empty(self):
        return not self.entries and not self.clean

    def stage(self, path, tracked_hash=None):
        """Stages the working copy of `path`.

        Returns 'staged', 'clean' or 'unchanged'. Raises FileNotFound when the
        working copy is missing.
        """
        content = workdir.read_file(self.repo_root, path)
        hash_val = objects.hash_object(self.repo_root, content, 'blob', write=False)

        if hash_val == tracked_hash:
            self.entries.pop(path, None)
            self.clean.add(path)
            return 'clean'

        self.clean.discard(path)
        if self.entries.get(path) == hash_val:
            return 'unchanged'

        objects.hash_object(self.repo_root, content, 'blob')
        self.entries[path] = hash_val
        return 'staged'

    def stage_hash(self, path, hash_val): # Records an already stored blob, used by merge
        self.clean.discard(path)
        self.entries[path] = hash_val

    def unstage(self, path):
        self.clean.discard(path)
        return self.entries.pop(path, None) is not None

    def clear(self):
        self.entries = {}
        self.clean = set()

    def staged_paths(self):
        return sorted(self.entries)


def get_index_path(repo_root):
    return os.path.join(repo_root, '.gitlet', 'index')


def get_pending_path(repo_root):
    return os.path.join(repo_root, '.gitlet', 'pending')


def read_index(repo_root):
    """
    Reads the index file and returns a dictionary {path: hash}.
    """
    index_path = get_index_path(repo_root)
    index_files = {}
    if os.path.exists(index_path):
        with open(index_path, 'r') as f:
            for line in f:
                line = line.rstrip('\n')
                if not line:
                    continue
                hash_val, path = line.split(' ', 1)
                index_files[path] = hash_val
    return index_files


def write_index(repo_root, index_dict):
    index_path = get_index_path(repo_root)
    os.makedirs(os.path.dirname(index_path), exist_ok=True)

    with open(index_path, 'w') as f:
        for path in sorted(index_dict.keys()):
            f.write(f"{index_dict[path]} {path}\n")


def read_pending(repo_root): # Returns {'clean': set, 'removed': set, 'untracked': set}
    pending = {kind: set() for kind in PENDING_KINDS}
    pending_path = get_pending_path(repo_root)
    if os.path.exists(pending_path):
        with open(pending_path, 'r') as f:
            for line in f:
                line = line.rstrip('\n')
                if not line:
                    continue
                kind, path = line.split(' ', 1)
                if kind not in pending:
                    raise ValueError(f"Corrupt pending file entry: {line}")
                pending[kind].add(path)
    return pending


def write_pending(repo_root, pending):
    with open(get_pending_path(repo_root), 'w') as f:
        for kind in PENDING_KINDS:
            for path in sorted(pending.get(kind, ())):
                f.write(f"{kind} {path}\n")


def load_staging_area(repo_root):
    pending = read_pending(repo_root)
    return StagingArea(repo_root, read_index(repo_root), pending['clean']), pending


def save_staging_area(staging, removed, untracked):
    write_index(staging.repo_root, staging.entries)
    write_pending(staging.repo_root, {
        'clean': staging.clean,
        'removed': removed,
        'untracked': untracked,
    })
