import contextlib
import io
import showedits
import unittest


class ShowEditsTestCase(unittest.TestCase):

    def run_main(self, argv):
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            status = showedits.main(argv)
        return status, out.getvalue()

    def test_operations(self):
        status, out = self.run_main(['horse', 'arose'])
        self.assertEqual(status, 0)
        self.assertEqual(out.splitlines(), [
            '3',
            '  swap a at index 0: aorse',
            'remove o at index 1: arse',
            '  keep r at index 1: arse',
            'insert o at index 2: arose',
            '  keep s at index 3: arose',
            '  keep e at index 4: arose',
        ])

    def test_distance_only(self):
        cases = (
            (['horse', 'arose', '-d'], '3\n'),
            (['', 'abc', '--distance-only'], '3\n'),
            (['horse', 'arose', '-d', '--swap-cost', '100'], '4\n'),
            (['ab', 'xyz', '-d', '--insert-cost', '2', '--remove-cost', '3',
                    '--swap-cost', '5'], '12\n'),
        )
        for argv, expected in cases:
            status, out = self.run_main(argv)
            self.assertEqual(status, 0)
            self.assertEqual(out, expected)

    def test_usage_errors(self):
        cases = (
            [],
            ['horse'],
            ['horse', 'arose', 'extra'],
            ['horse', 'arose', '--swap-cost', '-1'],
            ['horse', 'arose', '--insert-cost', 'x'],
        )
        for argv in cases:
            with contextlib.redirect_stderr(io.StringIO()) as err:
                with self.assertRaises(SystemExit) as cm:
                    self.run_main(argv)
            self.assertEqual(cm.exception.code, 2)
            self.assertIn('usage:', err.getvalue())

    def test_costs_logged_before_build(self):
        with self.assertLogs(level='DEBUG') as logs:
            self.run_main(['horse', 'arose', '--swap-cost', '2'])
        self.assertTrue(logs.output[0].startswith('INFO:root:Costs: '))
        self.assertIn('Built 6x6 matrix', logs.output[1])
