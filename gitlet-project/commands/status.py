# The command: gitlet status
# What it does: Provides a summary of the repository state: branches, staged files, removed files, unstaged modifications and untracked files
# How it does: It builds {path: hash} dictionaries for the HEAD commit, the staging area and the working directory and compares them. Staged changes come from the staging area, unstaged changes are index-or-HEAD vs. working directory, and untracked files are in the working directory but neither staged nor tracked
# What data structure it uses: Hash Table / Dictionary (to represent the three states for efficient O(1) average time complexity lookups), Sets (for efficient comparison of file lists)

from dataclasses import dataclass

from utils import repository, workdir


@dataclass(frozen=True)
class StatusReport:
    branches: tuple[str, ...]
    current_branch: str
    staged: tuple[str, ...]
    removed: tuple[str, ...]
    modified: tuple[tuple[str, str], ...]  # (path, 'modified' | 'deleted')
    untracked: tuple[str, ...]


def get_status(repo):
    head_files = repo.head.snapshot
    index_files = repo.staging.entries
    working_files = workdir.snapshot(repo.root)

    # What the next commit would record for each path, before looking at the working directory
    expected = {path: hash_val for path, hash_val in head_files.items() if path not in repo.untracked}
    expected.update(index_files)

    modified = []
    for path in sorted(expected):
        if path not in working_files:
            modified.append((path, 'deleted'))
        elif working_files[path] != expected[path]:
            modified.append((path, 'modified'))

    untracked = sorted(
        path for path in working_files
        if path not in index_files and (path not in head_files or path in repo.untracked)
    )

    return StatusReport(
        branches=tuple(sorted(repo.branches)),
        current_branch=repo.current_branch,
        staged=tuple(repo.staging.staged_paths()),
        removed=tuple(sorted(repo.removed)),
        modified=tuple(modified),
        untracked=tuple(untracked),
    )


def format_status(report):
    lines = ["=== Branches ==="]
    for branch in report.branches:
        lines.append(f"*{branch}" if branch == report.current_branch else branch)

    lines += ["", "=== Staged Files ==="] + list(report.staged)
    lines += ["", "=== Removed Files ==="] + list(report.removed)
    lines += ["", "=== Modifications Not Staged For Commit ==="]
    lines += [f"{path} ({change})" for path, change in report.modified]
    lines += ["", "=== Untracked Files ==="] + list(report.untracked)
    return "\n".join(lines) + "\n"


def run(args):
    repo = repository.open_repository()
    print(format_status(get_status(repo)))
