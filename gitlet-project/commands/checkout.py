# The command: gitlet checkout <branch-name> | -- <file> | <commit-id> -- <file>
# What it does: Restores a single file from HEAD or from any commit, OR switches the working directory to another branch
# How it does:
#   - `-- <file>` / `<id> -- <file>`: Resolves the (possibly abbreviated) commit id, reads the file's blob from the object store and overwrites the working copy. Nothing is staged.
#   - `<branch-name>`: Refuses to run if an untracked working file would be overwritten, then deletes files tracked only by the current commit, writes every file of the branch's HEAD commit, clears the staging area and points HEAD at the branch.
# What data structure it uses: Hash Table / Dictionary (commit snapshots, object store lookup), Set (the untracked files in the way)

from utils import repository, objects, workdir
from utils.errors import (
    AlreadyOnBranch, AmbiguousOrUnknownId, FileDoesNotExistInCommit,
    IncorrectOperands, NoCommitWithThatId, NoSuchBranch, UntrackedFileConflict,
)


def resolve_commit(repo, commit_id): # Expands an abbreviated id, reporting any miss as NoCommitWithThatId
    try:
        return repo.graph.lookup(repo.graph.resolve_short_id(commit_id))
    except AmbiguousOrUnknownId:
        raise NoCommitWithThatId() from None


def restore_file(repo, path, commit_id=None):
    commit = repo.head if commit_id is None else resolve_commit(repo, commit_id)
    if path not in commit.snapshot:
        raise FileDoesNotExistInCommit()
    workdir.write_file(repo.root, path, objects.read_blob(repo.root, commit.snapshot[path]))
    return commit


def find_untracked_conflicts(repo, target_snapshot):
    """Working files that are untracked and would be overwritten by target_snapshot.

    A file counts as untracked when HEAD does not track it (or it is marked
    removed) and it is not staged. Files already holding the target content
    are not in the way.
    """
    head_snapshot = repo.head.snapshot
    conflicts = []
    for path, hash_val in target_snapshot.items():
        if not workdir.exists(repo.root, path):
            continue
        if path in head_snapshot and path not in repo.untracked:
            continue
        if path in repo.staging:
            continue
        content = workdir.read_file(repo.root, path)
        if objects.compute_hash(content, 'blob') != hash_val:
            conflicts.append(path)
    return conflicts


def check_out_snapshot(repo, target): # Makes the working directory match target's snapshot
    conflicts = find_untracked_conflicts(repo, target.snapshot)
    if conflicts:
        raise UntrackedFileConflict(conflicts)

    # Deletes before writes, a path may be a file on one side and a directory on the other
    for path in repo.head.snapshot:
        if path not in target.snapshot:
            workdir.delete_file(repo.root, path)
    for path, hash_val in target.snapshot.items():
        workdir.write_file(repo.root, path, objects.read_blob(repo.root, hash_val))
    repo.clear_pending()


def switch_branch(repo, branch_name):
    if branch_name not in repo.branches:
        raise NoSuchBranch("No such branch exists.")
    if branch_name == repo.current_branch:
        raise AlreadyOnBranch()

    check_out_snapshot(repo, repo.graph.lookup(repo.branches[branch_name]))
    repo.current_branch = branch_name


def parse_operands(operands): # Returns (branch, commit_id, path); exactly one form is filled in
    if len(operands) == 1 and operands[0] != '--':
        return operands[0], None, None
    if len(operands) == 2 and operands[0] == '--':
        return None, None, operands[1]
    if len(operands) == 3 and operands[1] == '--':
        return None, operands[0], operands[2]
    raise IncorrectOperands()


def run(args):
    branch_name, commit_id, file_target = parse_operands(args.operands)
    repo = repository.open_repository()

    if branch_name is not None:
        switch_branch(repo, branch_name)
        repo.save()
        print(f"Switched to branch '{branch_name}'")
        return

    restore_file(repo, workdir.relative_path(repo.root, file_target), commit_id)
    repo.save()
