# Integration tests for complete workflows

import pytest
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'gitlet-project'))

from utils import repository, objects
from utils.errors import (
    AlreadyOnBranch, BranchExists, CannotRemoveCurrentBranch, EmptyMessage,
    FileDoesNotExistInCommit, FileNotFound, NoChanges, NoCommitWithMessage,
    NoCommitWithThatId, NoSuchBranch, NothingToCommit, NothingToRemove,
    UntrackedFileConflict,
)
from utils.graph import INITIAL_MESSAGE
from commands import add, commit, rm, log, find, status, branch, checkout, reset
from conftest import write, read


def _commit_file(repo, path, content, message):
    write(repo.root, path, content)
    add.add_file(repo, path)
    return commit.create_commit(repo, message)


class TestAddCommit:
    # Tests for the basic add -> commit workflow

    def test_log_after_two_commits(self, repo):
        _commit_file(repo, 'a.txt', 'x', 'm1')
        second = _commit_file(repo, 'a.txt', 'y', 'm2')

        entries = log.log_entries(repo)
        assert [c.message for c in entries] == ['m2', 'm1', INITIAL_MESSAGE]
        assert entries[0].id == second.id

    def test_commit_snapshot(self, repo):
        first = _commit_file(repo, 'a.txt', 'x', 'm1')
        assert objects.read_blob(repo.root, first.snapshot['a.txt']) == b'x'
        assert first.parent == repo.graph.root
        assert repo.head_id == first.id
        assert repo.staging.is_empty()

    def test_commit_carries_parent_files(self, repo):
        first = _commit_file(repo, 'a.txt', 'x', 'm1')
        second = _commit_file(repo, 'b.txt', 'y', 'm2')
        assert second.snapshot['a.txt'] == first.snapshot['a.txt']
        assert set(second.snapshot) == {'a.txt', 'b.txt'}

    def test_commit_after_commit_has_nothing(self, repo):
        _commit_file(repo, 'a.txt', 'x', 'm1')
        with pytest.raises(NothingToCommit):
            commit.create_commit(repo, 'm2')

    def test_empty_message(self, repo):
        write(repo.root, 'a.txt', 'x')
        add.add_file(repo, 'a.txt')
        with pytest.raises(EmptyMessage):
            commit.create_commit(repo, '')
        assert repo.staging.staged_paths() == ['a.txt']

    def test_add_missing_file(self, repo):
        with pytest.raises(FileNotFound):
            add.add_file(repo, 'missing.txt')

    def test_re_adding_unchanged_file(self, repo):
        _commit_file(repo, 'a.txt', 'x', 'm1')
        assert add.add_file(repo, 'a.txt') == 'clean'
        assert repo.staging.staged_paths() == []
        # Clean marks count as activity, but the snapshot is unchanged
        with pytest.raises(NoChanges):
            commit.create_commit(repo, 'm2')

    def test_add_cancels_rm(self, repo):
        _commit_file(repo, 'a.txt', 'x', 'm1')
        rm.remove_file(repo, 'a.txt')
        write(repo.root, 'a.txt', 'x')
        add.add_file(repo, 'a.txt')
        assert repo.removed == set()
        assert repo.untracked == set()


class TestRemove:

    def test_rm_tracked_file(self, repo):
        _commit_file(repo, 'a.txt', 'x', 'm1')
        rm.remove_file(repo, 'a.txt')

        assert not os.path.exists(os.path.join(repo.root, 'a.txt'))
        assert repo.removed == {'a.txt'}
        second = commit.create_commit(repo, 'remove a')
        assert 'a.txt' not in second.snapshot
        assert repo.removed == set() and repo.untracked == set()

    def test_rm_staged_file(self, repo):
        write(repo.root, 'a.txt', 'x')
        add.add_file(repo, 'a.txt')
        rm.remove_file(repo, 'a.txt')

        assert repo.staging.is_empty()
        assert os.path.exists(os.path.join(repo.root, 'a.txt'))
        assert repo.removed == set()

    def test_rm_unknown_file(self, repo):
        write(repo.root, 'a.txt', 'x')
        with pytest.raises(NothingToRemove):
            rm.remove_file(repo, 'a.txt')


class TestCheckoutFile:

    def test_restore_from_head(self, repo):
        _commit_file(repo, 'a.txt', 'x', 'm1')
        write(repo.root, 'a.txt', 'scribble')
        checkout.restore_file(repo, 'a.txt')
        assert read(repo.root, 'a.txt') == b'x'

    def test_restore_from_short_id(self, repo):
        first = _commit_file(repo, 'a.txt', 'x', 'm1')
        _commit_file(repo, 'a.txt', 'y', 'm2')
        checkout.restore_file(repo, 'a.txt', first.id[:8])
        assert read(repo.root, 'a.txt') == b'x'
        assert repo.staging.is_empty()

    def test_file_not_in_commit(self, repo):
        with pytest.raises(FileDoesNotExistInCommit):
            checkout.restore_file(repo, 'a.txt')

    def test_unknown_commit(self, repo):
        with pytest.raises(NoCommitWithThatId):
            checkout.restore_file(repo, 'a.txt', 'ffffffff')


class TestBranching:
    # Tests for branch creation and switching

    def test_branch_does_not_switch(self, repo):
        branch.create_branch(repo, 'dev')
        assert repo.current_branch == 'master'
        assert repo.branches['dev'] == repo.head_id

    def test_branch_exists(self, repo):
        with pytest.raises(BranchExists):
            branch.create_branch(repo, 'master')

    def test_delete_branch(self, repo):
        branch.create_branch(repo, 'dev')
        branch.delete_branch(repo, 'dev')
        assert 'dev' not in repo.branches
        with pytest.raises(NoSuchBranch):
            branch.delete_branch(repo, 'dev')
        with pytest.raises(CannotRemoveCurrentBranch):
            branch.delete_branch(repo, 'master')

    def test_switch_branch_rewrites_working_directory(self, repo):
        _commit_file(repo, 'a.txt', 'x', 'm1')
        branch.create_branch(repo, 'dev')
        checkout.switch_branch(repo, 'dev')
        _commit_file(repo, 'a.txt', 'dev version', 'dev edit')
        _commit_file(repo, 'only_dev.txt', 'd', 'dev add')

        checkout.switch_branch(repo, 'master')
        assert read(repo.root, 'a.txt') == b'x'
        assert not os.path.exists(os.path.join(repo.root, 'only_dev.txt'))

        checkout.switch_branch(repo, 'dev')
        assert read(repo.root, 'a.txt') == b'dev version'
        assert read(repo.root, 'only_dev.txt') == b'd'

    def test_switch_between_file_and_directory(self, repo):
        # master tracks d as a file, dev tracks d/x.txt
        _commit_file(repo, 'd', 'plain file', 'd is a file')
        branch.create_branch(repo, 'dev')
        checkout.switch_branch(repo, 'dev')
        rm.remove_file(repo, 'd')
        _commit_file(repo, os.path.join('d', 'x.txt'), 'nested', 'd is a directory')

        checkout.switch_branch(repo, 'master')
        assert repo.current_branch == 'master'
        assert read(repo.root, 'd') == b'plain file'

        checkout.switch_branch(repo, 'dev')
        assert repo.current_branch == 'dev'
        assert read(repo.root, os.path.join('d', 'x.txt')) == b'nested'

    def test_reset_between_file_and_directory(self, repo):
        as_file = _commit_file(repo, 'd', 'plain file', 'd is a file')
        rm.remove_file(repo, 'd')
        as_dir = _commit_file(repo, os.path.join('d', 'x.txt'), 'nested', 'd is a directory')

        reset.reset_to(repo, as_file.id)
        assert read(repo.root, 'd') == b'plain file'
        reset.reset_to(repo, as_dir.id)
        assert read(repo.root, os.path.join('d', 'x.txt')) == b'nested'

    def test_switch_clears_staging(self, repo):
        branch.create_branch(repo, 'dev')
        write(repo.root, 'a.txt', 'x')
        add.add_file(repo, 'a.txt')
        checkout.switch_branch(repo, 'dev')
        assert repo.staging.is_empty()

    def test_already_on_branch(self, repo):
        head = repo.head_id
        with pytest.raises(AlreadyOnBranch):
            checkout.switch_branch(repo, 'master')
        assert repo.head_id == head

    def test_no_such_branch(self, repo):
        with pytest.raises(NoSuchBranch):
            checkout.switch_branch(repo, 'ghost')

    def test_untracked_file_in_the_way(self, repo):
        branch.create_branch(repo, 'dev')
        checkout.switch_branch(repo, 'dev')
        _commit_file(repo, 'a.txt', 'tracked on dev', 'dev add')
        checkout.switch_branch(repo, 'master')

        write(repo.root, 'a.txt', 'precious local work')
        with pytest.raises(UntrackedFileConflict) as excinfo:
            checkout.switch_branch(repo, 'dev')
        assert excinfo.value.paths == ['a.txt']
        assert repo.current_branch == 'master'
        assert read(repo.root, 'a.txt') == b'precious local work'

    def test_untracked_file_with_same_content_is_not_in_the_way(self, repo):
        branch.create_branch(repo, 'dev')
        checkout.switch_branch(repo, 'dev')
        _commit_file(repo, 'a.txt', 'same', 'dev add')
        checkout.switch_branch(repo, 'master')

        write(repo.root, 'a.txt', 'same')
        checkout.switch_branch(repo, 'dev')
        assert repo.current_branch == 'dev'

    @pytest.mark.parametrize('operands, expected', [
        (['dev'], ('dev', None, None)),
        (['--', 'a.txt'], (None, None, 'a.txt')),
        (['abc123', '--', 'a.txt'], (None, 'abc123', 'a.txt')),
    ])
    def test_parse_operands(self, operands, expected):
        assert checkout.parse_operands(operands) == expected

    @pytest.mark.parametrize('operands', [[], ['--'], ['a', 'b'], ['abc', '++', 'a.txt'], ['a', 'b', 'c', 'd']])
    def test_parse_bad_operands(self, operands):
        from utils.errors import IncorrectOperands
        with pytest.raises(IncorrectOperands):
            checkout.parse_operands(operands)


class TestReset:

    def test_reset_moves_branch_and_files(self, repo):
        first = _commit_file(repo, 'a.txt', 'x', 'm1')
        _commit_file(repo, 'a.txt', 'y', 'm2')
        _commit_file(repo, 'b.txt', 'z', 'm3')

        reset.reset_to(repo, first.id[:10])
        assert repo.head_id == first.id
        assert repo.branches['master'] == first.id
        assert read(repo.root, 'a.txt') == b'x'
        assert not os.path.exists(os.path.join(repo.root, 'b.txt'))
        assert [c.message for c in log.log_entries(repo)] == ['m1', INITIAL_MESSAGE]

    def test_reset_clears_pending_state(self, repo):
        first = _commit_file(repo, 'a.txt', 'x', 'm1')
        _commit_file(repo, 'b.txt', 'y', 'm2')
        rm.remove_file(repo, 'b.txt')
        reset.reset_to(repo, first.id)
        assert repo.staging.is_empty()
        assert repo.removed == set() and repo.untracked == set()

    def test_reset_unknown_commit(self, repo):
        with pytest.raises(NoCommitWithThatId):
            reset.reset_to(repo, '0000000')

    def test_reset_untracked_conflict(self, repo):
        first = _commit_file(repo, 'a.txt', 'x', 'm1')
        rm.remove_file(repo, 'a.txt')
        commit.create_commit(repo, 'drop a')
        head = repo.head_id

        write(repo.root, 'a.txt', 'untracked now')
        with pytest.raises(UntrackedFileConflict):
            reset.reset_to(repo, first.id)
        assert repo.head_id == head


class TestQueries:

    def test_global_log_and_find(self, repo):
        first = _commit_file(repo, 'a.txt', 'x', 'same message')
        reset.reset_to(repo, repo.graph.root)
        second = _commit_file(repo, 'b.txt', 'y', 'same message')

        # Commits unreachable from any branch still show up
        assert len(log.global_log_entries(repo)) == 3
        assert set(find.find_commits(repo, 'same message')) == {first.id, second.id}
        with pytest.raises(NoCommitWithMessage):
            find.find_commits(repo, 'nothing like this')

    def test_format_entry(self, repo):
        entry = log.format_entry(repo.head, '%Y')
        lines = entry.splitlines()
        assert lines[0] == '==='
        assert lines[1] == f'commit {repo.head_id}'
        assert lines[2].startswith('Date: ')
        assert lines[3] == INITIAL_MESSAGE

    def test_status(self, repo):
        _commit_file(repo, 'tracked.txt', 'x', 'm1')
        _commit_file(repo, 'doomed.txt', 'x', 'm2')
        branch.create_branch(repo, 'dev')
        write(repo.root, 'b.txt', 'new')
        write(repo.root, 'a.txt', 'new')
        add.add_file(repo, 'b.txt')
        add.add_file(repo, 'a.txt')
        rm.remove_file(repo, 'doomed.txt')
        write(repo.root, 'tracked.txt', 'edited')
        write(repo.root, 'a.txt', 'edited after add')
        write(repo.root, 'stray.txt', 'who knows')

        report = status.get_status(repo)
        assert report.branches == ('dev', 'master')
        assert report.current_branch == 'master'
        assert report.staged == ('a.txt', 'b.txt')
        assert report.removed == ('doomed.txt',)
        assert report.modified == (('a.txt', 'modified'), ('tracked.txt', 'modified'))
        assert report.untracked == ('stray.txt',)

        text = status.format_status(report)
        assert text.startswith("=== Branches ===\ndev\n*master\n\n=== Staged Files ===\na.txt\nb.txt\n")
        assert "=== Removed Files ===\ndoomed.txt\n" in text
        assert "tracked.txt (modified)" in text

    def test_status_reports_deleted_without_rm(self, repo):
        _commit_file(repo, 'a.txt', 'x', 'm1')
        os.remove(os.path.join(repo.root, 'a.txt'))
        assert status.get_status(repo).modified == (('a.txt', 'deleted'),)


class TestPersistenceAcrossInvocations:

    def test_reload_and_continue(self, repo):
        _commit_file(repo, 'a.txt', 'x', 'm1')
        repo.save()

        reloaded = repository.open_repository(repo.root)
        _commit_file(reloaded, 'a.txt', 'y', 'm2')
        reloaded.save()

        final = repository.open_repository(repo.root)
        assert [c.message for c in log.log_entries(final)] == ['m2', 'm1', INITIAL_MESSAGE]
