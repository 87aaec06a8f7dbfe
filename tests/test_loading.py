import pandas as pd
import pytest

from id3.exceptions import InvalidDatasetError
from id3.types import MAX_FEATURE_CODE
from scripts.data.loading import FeatureEncoder, load_delimited, records_to_instances

MUSHROOM_SAMPLE = """\
p,x,s,n
e,x,s,y
e,b,s,w
p,x,y,w
e,?,s,y
e,b,y,n
"""


class TestFeatureEncoder:
    def test_assigns_next_unused_code(self):
        encoder = FeatureEncoder()
        assert encoder.encode("color", "red") == 0
        assert encoder.encode("color", "blue") == 1
        assert encoder.encode("color", "red") == 0
        assert encoder.encode("shape", "round") == 0
        assert encoder.n_values("color") == 2

    def test_decode(self):
        encoder = FeatureEncoder()
        encoder.encode("color", "red")
        encoder.encode("color", "blue")
        assert encoder.decode("color", 1) == "blue"
        with pytest.raises(KeyError):
            encoder.decode("color", 5)

    def test_code_bound(self):
        encoder = FeatureEncoder()
        for i in range(MAX_FEATURE_CODE + 1):
            encoder.encode("id", f"t{i}")
        with pytest.raises(InvalidDatasetError):
            encoder.encode("id", "one-too-many")


class TestLoadDelimited:
    def test_mushroom_style_file(self, tmp_path):
        path = tmp_path / "sample.data"
        path.write_text(MUSHROOM_SAMPLE)

        instances, encoder = load_delimited(
            path, ["cap-shape", "cap-surface", "cap-color"]
        )

        # the row with "?" is discarded
        assert len(instances) == 5
        assert [instance.target for instance in instances] == [False, True, True, False, True]
        assert instances[0].features == {"cap-shape": 0, "cap-surface": 0, "cap-color": 0}
        assert instances[2].features == {"cap-shape": 1, "cap-surface": 0, "cap-color": 2}
        assert encoder.decode("cap-color", 1) == "y"

    def test_default_feature_names(self, tmp_path):
        path = tmp_path / "sample.data"
        path.write_text(MUSHROOM_SAMPLE)
        instances, _ = load_delimited(path)
        assert sorted(instances[0].features) == ["f1", "f2", "f3"]

    def test_target_column_and_delimiter(self, tmp_path):
        path = tmp_path / "votes.tsv"
        path.write_text("y\tn\tyes\nn\tn\tno\n")
        instances, _ = load_delimited(
            path,
            ["q1", "q2"],
            target_column=2,
            positive="yes",
            negative="no",
            delimiter="\t",
        )
        assert [instance.target for instance in instances] == [True, False]
        assert instances[1].features == {"q1": 1, "q2": 0}

    def test_column_count_mismatch(self, tmp_path):
        path = tmp_path / "sample.data"
        path.write_text(MUSHROOM_SAMPLE)
        with pytest.raises(InvalidDatasetError):
            load_delimited(path, ["only-one"])

    def test_invalid_label(self, tmp_path):
        path = tmp_path / "sample.data"
        path.write_text("e,x\nq,y\n")
        with pytest.raises(InvalidDatasetError):
            load_delimited(path, ["cap-shape"])


class TestRecordsToInstances:
    def test_any_other_label_is_negative(self):
        frame = pd.DataFrame({"f": ["a", "b", "c"], "target": ["1", "2", "3"]})
        instances, _ = records_to_instances(frame, "target", positive="2", missing=None)
        assert [instance.target for instance in instances] == [False, True, False]

    def test_shared_encoder_keeps_codes_stable(self):
        train = pd.DataFrame({"f": ["a", "b"], "y": ["e", "p"]})
        test = pd.DataFrame({"f": ["b", "c"], "y": ["e", "e"]})
        _, encoder = records_to_instances(train, "y", positive="e", negative="p")
        instances, _ = records_to_instances(
            test, "y", positive="e", negative="p", encoder=encoder
        )
        assert [instance.features["f"] for instance in instances] == [1, 2]

    def test_missing_target_column(self):
        frame = pd.DataFrame({"f": ["a"]})
        with pytest.raises(InvalidDatasetError):
            records_to_instances(frame, "target", positive="e")
