# What it does: Defines every error a Gitlet operation can report to the user
# How it does: A small class hierarchy rooted at GitletError. Each class carries its user-facing message so the CLI can print `str(error)` without knowing which operation failed
# What data structure it uses: Class hierarchy (three families: bad user input, inconsistent repository state, and conflicts with the working directory)


class GitletError(Exception):
    """Base class for errors reported to the user.

    A GitletError means the operation was aborted before it changed anything.
    """

    message = "gitlet error"

    def __init__(self, message=None):
        super().__init__(message or self.message)


class UserInputError(GitletError):
    """Bad operands, missing files, empty messages."""


class StateConsistencyError(GitletError):
    """The request names a commit, branch or state that does not fit the repository."""


class ConflictOutcome(GitletError):
    """The working directory holds something the operation would clobber."""


# User input

class IncorrectOperands(UserInputError):
    message = "Incorrect operands."


class NoCommandWithThatName(UserInputError):
    message = "No command with that name exists."


class FileNotFound(UserInputError):
    message = "File does not exist."


class EmptyMessage(UserInputError):
    message = "Please enter a commit message."


class NothingToCommit(UserInputError):
    message = "No changes added to the commit."


class NoChanges(UserInputError):
    message = "No changes added to the commit."


class NothingToRemove(UserInputError):
    message = "No reason to remove the file."


class InvalidConfigKey(UserInputError):
    message = "Invalid key format. Should be 'section.key'."


class NotInitialized(UserInputError):
    message = "Not in an initialized Gitlet directory."


class AlreadyInitialized(UserInputError):
    message = "A Gitlet version-control system already exists in the current directory."


# Repository state

class NotFound(StateConsistencyError):
    message = "Object not found."


class UnknownCommit(StateConsistencyError):
    message = "No commit with that id exists."


class AmbiguousOrUnknownId(StateConsistencyError):
    message = "No commit with that id exists."


class NoCommitWithThatId(StateConsistencyError):
    message = "No commit with that id exists."


class NoSuchBranch(StateConsistencyError):
    message = "A branch with that name does not exist."


class BranchExists(StateConsistencyError):
    message = "A branch with that name already exists."


class CannotRemoveCurrentBranch(StateConsistencyError):
    message = "Cannot remove the current branch."


class AlreadyOnBranch(StateConsistencyError):
    message = "No need to checkout the current branch."


class FileDoesNotExistInCommit(StateConsistencyError):
    message = "File does not exist in that commit."


class NoCommitWithMessage(StateConsistencyError):
    message = "Found no commit with that message."


class UncommittedChanges(StateConsistencyError):
    message = "You have uncommitted changes."


class CannotMergeSelf(StateConsistencyError):
    message = "Cannot merge a branch with itself."


class GivenIsAncestor(StateConsistencyError):
    message = "Given branch is an ancestor of the current branch."


# Working directory

class UntrackedFileConflict(ConflictOutcome):
    """Raised when checkout, reset or merge would overwrite an untracked file.

    Attributes:
        paths: The untracked paths that are in the way, sorted.
    """

    message = "There is an untracked file in the way; delete it, or add and commit it first."

    def __init__(self, paths=()):
        self.paths = sorted(paths)
        super().__init__()
