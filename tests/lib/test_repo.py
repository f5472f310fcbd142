import unittest
import unittest.mock

from brk.lib.git import repo
from brk.lib.git.repo import BranchAge, parse_branch_ages, parse_branch_names
from test_utils import captured, failed, ok


class WorkTreeTests(unittest.TestCase):
    """Tests for the repository precondition."""

    @unittest.mock.patch("brk.lib.git.repo.capture", return_value=ok(output="true\n"))
    def test_inside_work_tree(self, mock_capture: unittest.mock.Mock) -> None:
        self.assertTrue(repo.is_inside_work_tree())
        mock_capture.assert_called_once_with(["git", "rev-parse", "--is-inside-work-tree"])

    @unittest.mock.patch("brk.lib.git.repo.capture", return_value=ok(output="false\n"))
    def test_inside_git_dir_is_not_a_work_tree(self, _capture: unittest.mock.Mock) -> None:
        self.assertFalse(repo.is_inside_work_tree())

    @unittest.mock.patch(
        "brk.lib.git.repo.capture", return_value=failed(error="fatal: not a git repository")
    )
    def test_require_work_tree_exits(self, _capture: unittest.mock.Mock) -> None:
        with captured() as (out, err), self.assertRaises(SystemExit) as ctx:
            repo.require_work_tree()
        self.assertEqual(ctx.exception.code, repo.NOT_A_REPOSITORY)
        self.assertEqual(out.getvalue(), "")
        self.assertEqual(err.getvalue(), "")


class CurrentBranchTests(unittest.TestCase):
    """Tests for current_branch()."""

    @unittest.mock.patch("brk.lib.git.repo.capture", return_value=ok(output="feature/x\n"))
    def test_returns_branch(self, _capture: unittest.mock.Mock) -> None:
        self.assertEqual(repo.current_branch(), "feature/x")

    @unittest.mock.patch("brk.lib.git.repo.capture", return_value=ok(output="\n"))
    def test_detached_head_is_none(self, _capture: unittest.mock.Mock) -> None:
        self.assertIsNone(repo.current_branch())

    @unittest.mock.patch("brk.lib.git.repo.capture", return_value=failed(error="boom"))
    def test_failure_is_reported(self, _capture: unittest.mock.Mock) -> None:
        with captured() as (_out, err):
            self.assertIsNone(repo.current_branch())
        self.assertIn("Error getting current branch: boom", err.getvalue())


class QueryArgsTests(unittest.TestCase):
    """The queries hand git the expected argv."""

    @unittest.mock.patch("brk.lib.git.repo.capture", return_value=ok())
    def test_cherry(self, mock_capture: unittest.mock.Mock) -> None:
        repo.cherry("master", "feature")
        mock_capture.assert_called_once_with(["git", "cherry", "master", "feature"])

    @unittest.mock.patch("brk.lib.git.repo.capture", return_value=ok())
    def test_one_line_log(self, mock_capture: unittest.mock.Mock) -> None:
        repo.one_line_log("abc123")
        mock_capture.assert_called_once_with(["git", "log", "--oneline", "-n", "1", "abc123"])

    @unittest.mock.patch("brk.lib.git.repo.capture", return_value=ok())
    def test_recent_branches_sorted_by_committer_date(
        self, mock_capture: unittest.mock.Mock
    ) -> None:
        repo.recent_branches()
        argv = mock_capture.call_args[0][0]
        self.assertIn("--sort=-committerdate", argv)

    @unittest.mock.patch("brk.lib.git.repo.capture", return_value=ok())
    def test_listings_are_limited_to_local_branch_refs(
        self, mock_capture: unittest.mock.Mock
    ) -> None:
        repo.recent_branches()
        repo.branch_ages()
        repo.local_branch_names()
        for call in mock_capture.call_args_list:
            argv = call.args[0]
            self.assertEqual(argv[:2], ["git", "for-each-ref"])
            self.assertEqual(argv[-1], "refs/heads/")

    @unittest.mock.patch(
        "brk.lib.git.repo.capture",
        return_value=ok(output="(HEAD detached at 776142b)\nmaster\nfeature\n"),
    )
    def test_local_branch_names_skip_detached_head(self, _capture: unittest.mock.Mock) -> None:
        self.assertEqual(repo.local_branch_names(), ["master", "feature"])

    @unittest.mock.patch("brk.lib.git.repo.capture", return_value=failed())
    def test_local_branch_names_empty_on_failure(self, _capture: unittest.mock.Mock) -> None:
        self.assertEqual(repo.local_branch_names(), [])


class ParserTests(unittest.TestCase):
    def test_parse_branch_names_limit_and_blank_lines(self) -> None:
        output = "a\n\nb\nc\n d \ne\nf\n"
        self.assertEqual(parse_branch_names(output), ["a", "b", "c", "d", "e", "f"])
        self.assertEqual(parse_branch_names(output, limit=5), ["a", "b", "c", "d", "e"])
        self.assertEqual(parse_branch_names(""), [])

    def test_parse_branch_ages_keeps_whole_age(self) -> None:
        output = "old 3 months ago\nancient 2 years, 1 month ago\nfresh 3 days ago\nbare\n"
        self.assertEqual(
            parse_branch_ages(output),
            [
                BranchAge("old", "3 months ago"),
                BranchAge("ancient", "2 years, 1 month ago"),
                BranchAge("fresh", "3 days ago"),
            ],
        )

    def test_detached_head_entry_is_not_a_branch(self) -> None:
        names = "(HEAD detached at 776142b)\nmaster\nfeature\n"
        self.assertEqual(parse_branch_names(names, limit=1), ["master"])
        ages = "(HEAD detached at 776142b) 3 years ago\nmaster 3 years ago\n"
        self.assertEqual(parse_branch_ages(ages), [BranchAge("master", "3 years ago")])

    def test_stale_ages(self) -> None:
        self.assertTrue(BranchAge("a", "1 year ago").is_stale)
        self.assertTrue(BranchAge("a", "5 months ago").is_stale)
        self.assertFalse(BranchAge("a", "3 days ago").is_stale)
        self.assertFalse(BranchAge("a", "2 weeks ago").is_stale)


if __name__ == "__main__":
    unittest.main()
