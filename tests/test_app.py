import io
import json
import os
import shutil
import tempfile
import unittest
from contextlib import redirect_stdout
from unittest.mock import patch

from app import main
from gesturemap.errors import EmptyDatasetError
from gesturemap.main import GestureMap, run
from gesturemap.data_loader import load_records
from gesturemap.records import train_test_split
from tests.data_utils import synthetic_gestures, write_gesture_csv


class TestApp(unittest.TestCase):
    def setUp(self):
        self.tmp_dir = tempfile.mkdtemp()
        self.csv_path = os.path.join(self.tmp_dir, "gestures.csv")
        write_gesture_csv(self.csv_path, synthetic_gestures())

    def tearDown(self):
        shutil.rmtree(self.tmp_dir, ignore_errors=True)

    def test_run_reports_accuracy(self):
        report = run(self.csv_path, train_size=0.6)

        self.assertEqual(report.total, 4)
        self.assertEqual(report.accuracy, 1.0)

    def test_main_prints_accuracy_and_writes_report(self):
        report_path = os.path.join(self.tmp_dir, "record", "run.json")
        out = io.StringIO()
        with redirect_stdout(out):
            status = main([self.csv_path, "--train-size", "0.6", "--report", report_path])

        self.assertEqual(status, 0)
        self.assertIn("Accuracy: 1.0", out.getvalue())

        with open(report_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        self.assertEqual(data['accuracy'], 1.0)
        self.assertEqual(data['total'], 4)
        self.assertEqual(data['train_size'], 0.6)
        self.assertFalse(data['normalized'])
        self.assertEqual(data['source'], self.csv_path)
        self.assertEqual(set(data['per_class']), {'1', '2'})

    def test_show_paths_prints_alignment(self):
        out = io.StringIO()
        with redirect_stdout(out):
            status = main([self.csv_path, "--train-size", "0.6", "--show-paths", "--normalized"])

        self.assertEqual(status, 0)
        self.assertIn("Record 7 (gesture 1)", out.getvalue())

    def test_missing_file_exits_with_error(self):
        status = main([os.path.join(self.tmp_dir, "missing.csv")])
        self.assertEqual(status, 1)

    def test_malformed_file_exits_with_error(self):
        bad_path = os.path.join(self.tmp_dir, "bad.csv")
        with open(bad_path, 'w', encoding='utf-8') as f:
            f.write('id,user,gesture,x,y,z\n1,0,1,"[1.0, x]","[1.0]","[1.0]"\n')
        self.assertEqual(main([bad_path]), 1)

    def test_bad_train_size_exits_with_error(self):
        self.assertEqual(main([self.csv_path, "--train-size", "1.5"]), 1)

    def test_nan_coordinates_exit_with_error(self):
        bad_path = os.path.join(self.tmp_dir, "nan.csv")
        with open(bad_path, 'w', encoding='utf-8') as f:
            f.write('id,user,gesture,x,y,z\n'
                    '1,0,1,"[nan, 1.0]","[0.0, 0.0]","[0.0, 0.0]"\n'
                    '2,0,1,"[1.0, 2.0]","[0.0, 0.0]","[0.0, 0.0]"\n')
        self.assertEqual(main([bad_path, "--show-paths"]), 1)

    def test_show_paths_uses_each_test_record_with_duplicate_ids(self):
        records = load_records(self.csv_path)
        train, test = train_test_split(records, 0.6)
        # Two test records share an id; each must be printed with its own alignment
        test[1].id = test[0].id
        model = GestureMap(train, test)
        model.train()

        printed = []
        with patch.object(GestureMap, 'print_path', lambda self, record: printed.append(record)):
            report = model.test(show_paths=True)

        self.assertEqual(report.correct, len(test))
        self.assertEqual([r.gesture for r in printed], [r.gesture for r in test])
        for shown, record in zip(printed, test):
            self.assertIs(shown, record)

    def test_gesture_map_requires_test_records(self):
        train, _ = train_test_split(load_records(self.csv_path), 0.6)
        model = GestureMap(train, [])
        model.train()
        with self.assertRaises(EmptyDatasetError):
            model.test()


if __name__ == '__main__':
    unittest.main()
