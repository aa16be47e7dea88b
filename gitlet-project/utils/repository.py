# What it does: Owns the repository context object (commit graph, branch table, HEAD, staging area and pending removals) and loads/saves it from the `.gitlet` directory
# How it does: `load_repository` rebuilds the whole state from disk once per invocation, commands mutate the in-memory Repository, and `save` writes it back. Branch pointers live in `refs/heads`, `HEAD` names the current branch, and commits are stored as objects listed in creation order by `logs/commits`. `find_repo_root` walks up the directory tree to locate the `.gitlet` directory
# What data structure it uses: Uses recursion (specifically, linear recursion) to find the repo root. Hash Table (branch name -> commit id), Sets (removed and untracked paths), and the commit DAG from utils/graph.py

import os
import time
from . import objects, index as index_utils, config as config_utils
from .errors import AlreadyInitialized, NotInitialized
from .graph import CommitGraph, parse_commit

DEFAULT_BRANCH = 'master'


def find_repo_root(path='.'): # Recursively searches for the .gitlet directory to find the repository root
    path = os.path.abspath(path)
    gitlet_dir = os.path.join(path, '.gitlet')
    if os.path.isdir(gitlet_dir):
        return path
    parent_path = os.path.dirname(path)
    if parent_path == path:
        return None
    return find_repo_root(parent_path)


class Repository:
    """The single active repository for one invocation.

    Constructed from disk by ``load_repository`` (or ``init_repository``),
    passed explicitly to every command, and written back with ``save``.
    """

    def __init__(self, root, graph, branches, current_branch, staging,
                 removed=None, untracked=None, config=None):
        self.root = root
        self.graph = graph
        self.branches = dict(branches)
        self.current_branch = current_branch
        self.staging = staging
        self.removed = set(removed or ())
        self.untracked = set(untracked or ())
        self.config = config if config is not None else config_utils.read_config(root)

    @property
    def head_id(self):
        return self.branches[self.current_branch]

    @property
    def head(self):
        return self.graph.lookup(self.head_id)

    def tracked_hash(self, path): # Blob hash HEAD tracks for path, or None
        return self.head.snapshot.get(path)

    def move_head(self, commit_id): # Retargets the current branch (and so HEAD) at an existing commit
        self.graph.lookup(commit_id)
        self.branches[self.current_branch] = commit_id

    def has_pending_changes(self):
        return not self.staging.is_empty() or bool(self.untracked)

    def clear_pending(self):
        self.staging.clear()
        self.removed.clear()
        self.untracked.clear()

    def abbrev(self, commit_id):
        return commit_id[:config_utils.get_abbrev(self.config)]

    def save(self):
        gitlet_dir = os.path.join(self.root, '.gitlet')

        for commit in self.graph.commits():
            objects.hash_object(self.root, commit.to_record(), 'commit')
        with open(os.path.join(gitlet_dir, 'logs', 'commits'), 'w') as f:
            for commit in self.graph.commits():
                f.write(f"{commit.id}\n")

        heads_dir = os.path.join(gitlet_dir, 'refs', 'heads')
        for name in os.listdir(heads_dir):
            if name not in self.branches:
                os.remove(os.path.join(heads_dir, name))
        for name, commit_id in self.branches.items():
            with open(os.path.join(heads_dir, name), 'w') as f:
                f.write(f"{commit_id}\n")

        with open(os.path.join(gitlet_dir, 'HEAD'), 'w') as f:
            f.write(f"ref: refs/heads/{self.current_branch}\n")

        index_utils.save_staging_area(self.staging, self.removed, self.untracked)


def init_repository(path='.', clock=time.time): # Creates the .gitlet layout with the initial commit on master
    repo_root = os.path.abspath(path)
    gitlet_dir = os.path.join(repo_root, '.gitlet')
    if os.path.exists(gitlet_dir):
        raise AlreadyInitialized()

    os.makedirs(os.path.join(gitlet_dir, 'objects'))
    os.makedirs(os.path.join(gitlet_dir, 'refs', 'heads'))
    os.makedirs(os.path.join(gitlet_dir, 'logs'))

    graph = CommitGraph.initial(clock)
    repo = Repository(
        repo_root, graph, {DEFAULT_BRANCH: graph.root}, DEFAULT_BRANCH,
        index_utils.StagingArea(repo_root),
    )
    repo.save()
    return repo


def read_commit_log(repo_root):
    log_path = os.path.join(repo_root, '.gitlet', 'logs', 'commits')
    with open(log_path, 'r') as f:
        return [line.strip() for line in f if line.strip()]


def get_current_branch(repo_root): # Retrieves the name of the branch HEAD points to
    with open(os.path.join(repo_root, '.gitlet', 'HEAD'), 'r') as f:
        head_content = f.read().strip()
    if not head_content.startswith('ref: refs/heads/'):
        raise ValueError(f"Corrupt HEAD: {head_content}")
    return head_content[len('ref: refs/heads/'):]


def get_all_branches(repo_root): # Reads every branch pointer in refs/heads into {name: commit id}
    heads_dir = os.path.join(repo_root, '.gitlet', 'refs', 'heads')
    branches = {}
    for name in os.listdir(heads_dir):
        with open(os.path.join(heads_dir, name), 'r') as f:
            branches[name] = f.read().strip()
    return branches


def load_repository(repo_root, clock=time.time):
    graph = CommitGraph(clock)
    for commit_id in read_commit_log(repo_root):
        obj_type, content = objects.read_object(repo_root, commit_id)
        if obj_type != 'commit':
            raise TypeError(f"Object {commit_id} is not a commit")
        graph.add(parse_commit(commit_id, content))

    branches = get_all_branches(repo_root)
    for commit_id in branches.values():
        graph.lookup(commit_id)

    staging, pending = index_utils.load_staging_area(repo_root)
    return Repository(
        repo_root, graph, branches, get_current_branch(repo_root), staging,
        pending['removed'], pending['untracked'],
    )


def open_repository(path='.', clock=time.time): # Finds the enclosing repository and loads it, or raises NotInitialized
    repo_root = find_repo_root(path)
    if not repo_root:
        raise NotInitialized()
    return load_repository(repo_root, clock)
