# The command: gitlet commit "<message>"
# What it does: Creates a permanent, uniquely identified snapshot (a commit) of the currently staged changes
# How it does: It copies the HEAD commit's snapshot, layers the staged blob hashes on top, drops every path marked by `gitlet rm`, and hands the result to the commit graph. The current branch is moved to the new commit and all pending state is cleared, so the working state is "clean" again
# What data structure it uses: Hash Table / Dictionary (the path -> blob snapshot), Directed Acyclic Graph (DAG) (each commit links to its parent, forming the history graph)

from utils import repository
from utils.errors import EmptyMessage, NothingToCommit


def create_commit(repo, message): # Commits the staging area on the current branch and returns the new Commit
    if not message or not message.strip():
        raise EmptyMessage()
    if repo.staging.is_empty() and not repo.untracked:
        raise NothingToCommit()

    parent = repo.head
    snapshot = dict(parent.snapshot)
    snapshot.update(repo.staging.entries)
    for path in repo.untracked:
        snapshot.pop(path, None)

    new_commit = repo.graph.create_commit(parent.id, message, snapshot, removals=tuple(repo.untracked))
    repo.move_head(new_commit.id)
    repo.clear_pending()
    return new_commit


def run(args):
    repo = repository.open_repository()
    new_commit = create_commit(repo, args.message)
    repo.save()
    print(f"[{repo.current_branch} {repo.abbrev(new_commit.id)}] {new_commit.message.splitlines()[0]}")
