# The command: gitlet branch <branch-name> / gitlet rm-branch <branch-name>
# What it does: Creates a new branch pointer at the current HEAD commit (without switching to it), or deletes a branch pointer
# How it does: It adds or removes one entry in the branch table; the commits themselves are never touched. The current branch can never be deleted
# What data structure it uses: Map / Dictionary (the branch table maps branch names to commit ids, persisted as files in `.gitlet/refs/heads`)

from utils import repository
from utils.errors import BranchExists, CannotRemoveCurrentBranch, NoSuchBranch


def create_branch(repo, name):
    if name in repo.branches:
        raise BranchExists()
    repo.branches[name] = repo.head_id
    return repo.head_id


def delete_branch(repo, name):
    if name not in repo.branches:
        raise NoSuchBranch()
    if name == repo.current_branch:
        raise CannotRemoveCurrentBranch()
    return repo.branches.pop(name)


def run(args):
    repo = repository.open_repository()
    commit_id = create_branch(repo, args.name)
    repo.save()
    print(f"Branch '{args.name}' created at commit {repo.abbrev(commit_id)}")


def run_delete(args):
    repo = repository.open_repository()
    commit_id = delete_branch(repo, args.name)
    repo.save()
    print(f"Deleted branch {args.name} (was {repo.abbrev(commit_id)}).")
