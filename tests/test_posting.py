import dataclasses
import json
import unittest

from indexstore import InvertedIndex, Posting


class InvertedIndexTests(unittest.TestCase):
    def setUp(self) -> None:
        self.index = InvertedIndex()

    def test_unknown_term_has_no_postings(self) -> None:
        self.assertEqual(self.index.postings("missing"), [])
        self.assertEqual(len(self.index), 0)

    def test_extend_appends_without_merging(self) -> None:
        self.index.extend(0, {"cat": 2})
        self.index.extend(0, {"cat": 2})
        self.index.extend(1, {"cat": 5, "dog": 1})

        self.assertEqual(
            self.index.postings("cat"),
            [Posting(0, 2), Posting(0, 2), Posting(1, 5)],
        )
        self.assertEqual(len(self.index), 2)

    def test_postings_returns_a_new_list(self) -> None:
        self.index.extend(0, {"cat": 2})
        self.index.postings("cat").append(Posting(9, 9))
        self.assertEqual(self.index.postings("cat"), [Posting(0, 2)])

    def test_posting_is_immutable(self) -> None:
        with self.assertRaises(dataclasses.FrozenInstanceError):
            Posting(0, 2).tf = 3

    def test_to_dict_is_json_serializable(self) -> None:
        self.index.extend(0, {"cat": 2})
        self.index.extend(1, {"dog": 1})

        data = json.loads(json.dumps(self.index.to_dict()))
        self.assertEqual(
            data,
            {
                "cat": [{"doc_id": 0, "tf": 2}],
                "dog": [{"doc_id": 1, "tf": 1}],
            },
        )


if __name__ == "__main__":
    unittest.main()
