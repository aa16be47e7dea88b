# The command: gitlet rm <file>
# What it does: Unstages a file, or stops tracking it so the next commit no longer contains it
# How it does: A file tracked by the HEAD commit is deleted from the working directory and marked removed/untracked. A staged file is dropped from the staging area. A file that is neither staged, tracked nor clean is an error
# What data structure it uses: Hash Table / Dictionary (staging area, HEAD snapshot), Set (removed and untracked paths)

from utils import repository, workdir
from utils.errors import NothingToRemove


def remove_file(repo, path):
    tracked = repo.tracked_hash(path) is not None
    if path not in repo.staging and not tracked and path not in repo.staging.clean:
        raise NothingToRemove()

    if tracked:
        workdir.delete_file(repo.root, path)
        repo.removed.add(path)
        repo.untracked.add(path)
    repo.staging.unstage(path)


def run(args):
    repo = repository.open_repository()
    remove_file(repo, workdir.relative_path(repo.root, args.file))
    repo.save()
