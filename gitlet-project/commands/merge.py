# The command: gitlet merge <branch-name>
# What it does: Performs a three-way merge between the current branch, the given branch, and their split point (latest common ancestor)
# How it does: After the safety checks it either reports that nothing needs merging, fast-forwards the current branch, or compares every file across the split point, the current HEAD and the given branch's HEAD. Changes made on only one side are taken; changes made differently on both sides become conflict files. Without conflicts the result is committed automatically
# What data structure it uses: DAG (for finding the split point), Hash Table / Dictionary (the three snapshots being compared), Set (the union of all paths)

from dataclasses import dataclass

from utils import repository, objects, workdir
from utils.errors import (
    CannotMergeSelf, GivenIsAncestor, NoSuchBranch, UncommittedChanges, UntrackedFileConflict,
)
from commands.checkout import check_out_snapshot, find_untracked_conflicts
from commands.commit import create_commit


@dataclass(frozen=True)
class MergeResult:
    """Result of a merge that got past its preconditions."""

    strategy: str  # "fast_forward", "merged", "conflict"
    commit: str | None
    conflicts: tuple[str, ...] = ()

    def __bool__(self):
        return self.strategy != 'conflict'


def merge_message(current_branch, given_branch):
    return f"Merged {current_branch} with {given_branch}."


def merge_branch(repo, branch_name):
    if repo.has_pending_changes():
        raise UncommittedChanges()
    if branch_name not in repo.branches:
        raise NoSuchBranch()
    if branch_name == repo.current_branch:
        raise CannotMergeSelf()

    current = repo.head
    given = repo.graph.lookup(repo.branches[branch_name])

    in_the_way = find_untracked_conflicts(repo, given.snapshot)
    if in_the_way:
        raise UntrackedFileConflict(in_the_way)

    if repo.graph.is_ancestor(given.id, current.id):
        raise GivenIsAncestor()
    if repo.graph.is_ancestor(current.id, given.id):
        check_out_snapshot(repo, given)
        repo.move_head(given.id)
        return MergeResult('fast_forward', given.id)

    split = repo.graph.split_point(current.id, given.id)
    conflicts = _perform_three_way_merge(repo, split.snapshot if split else {}, current.snapshot, given.snapshot)
    if conflicts:
        return MergeResult('conflict', None, tuple(conflicts))

    new_commit = create_commit(repo, merge_message(repo.current_branch, branch_name))
    return MergeResult('merged', new_commit.id)


def _perform_three_way_merge(repo, split_files, head_files, given_files):
    """Applies the merge to the working directory and staging area, returns the conflicting paths"""
    all_files = set(split_files) | set(head_files) | set(given_files)
    outcomes = {
        file_path: _merge_file(split_files.get(file_path), head_files.get(file_path), given_files.get(file_path))
        for file_path in sorted(all_files)
    }

    # Removals are applied before any write, a path may be a file on one side and a directory on the other
    for file_path, result in outcomes.items():
        if result == 'take_given' and file_path not in given_files:
            _remove_file(repo, file_path)

    conflicts = []
    for file_path, result in outcomes.items():
        head_hash = head_files.get(file_path)
        given_hash = given_files.get(file_path)
        if result == 'conflict':
            conflicts.append(file_path)
            _create_conflict_file(repo, file_path, head_hash, given_hash)
        elif result == 'take_given' and given_hash is not None:
            _stage_file_version(repo, file_path, given_hash)

    return conflicts


def _merge_file(split_hash, head_hash, given_hash):
    """Classifies one path; a None hash means the file is absent on that side"""

    # Same on both sides (including deleted on both)
    if head_hash == given_hash:
        return 'unchanged'

    # Untouched on the current side since the split: the given branch wins,
    # which also covers files that only the given branch added
    if head_hash == split_hash:
        return 'take_given'

    # Untouched on the given side: keep what we have
    if given_hash == split_hash:
        return 'keep_current'

    # Both sides changed it, and differently
    return 'conflict'


def _stage_file_version(repo, file_path, blob_hash):
    workdir.write_file(repo.root, file_path, objects.read_blob(repo.root, blob_hash))
    repo.staging.stage_hash(file_path, blob_hash)


def _remove_file(repo, file_path):
    workdir.delete_file(repo.root, file_path)
    repo.untracked.add(file_path)


def conflict_content(head_content, given_content):
    return b"<<<<<<< HEAD\n" + (head_content or b"") + b"=======\n" + (given_content or b"") + b">>>>>>>\n"


def _create_conflict_file(repo, file_path, head_hash, given_hash):
    head_content = objects.read_blob(repo.root, head_hash) if head_hash else None
    given_content = objects.read_blob(repo.root, given_hash) if given_hash else None

    content = conflict_content(head_content, given_content)
    workdir.write_file(repo.root, file_path, content)
    repo.staging.stage_hash(file_path, objects.write_blob(repo.root, content))


def run(args):
    repo = repository.open_repository()
    result = merge_branch(repo, args.branch)
    repo.save()

    if result.strategy == 'fast_forward':
        print("Current branch fast-forwarded.")
    elif result.strategy == 'conflict':
        for path in result.conflicts:
            print(f"CONFLICT (content): Merge conflict in {path}")
        print("Encountered a merge conflict.")
    else:
        print(f"[{repo.current_branch} {repo.abbrev(result.commit)}] {merge_message(repo.current_branch, args.branch)}")
