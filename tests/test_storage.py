import yaml

from holetap.core.storage import BestScoreStore, MemoryBestScore


def test_missing_file_reads_zero(tmp_path):
    assert BestScoreStore(tmp_path / "nope.yaml").load_best() == 0


def test_save_then_load(tmp_path):
    path = tmp_path / "runtime" / "best.yaml"
    store = BestScoreStore(path)
    store.save_best(420)
    assert yaml.safe_load(path.read_text()) == {"best": 420}
    assert BestScoreStore(path).load_best() == 420


def test_garbage_reads_zero(tmp_path):
    path = tmp_path / "best.yaml"
    for text in ("best: [unclosed", "- 1\n- 2\n", "best: lots", "best: -5"):
        path.write_text(text)
        assert BestScoreStore(path).load_best() == 0


def test_failed_write_is_swallowed(tmp_path):
    # a directory where the file should be
    path = tmp_path / "best.yaml"
    path.mkdir()
    BestScoreStore(path).save_best(10)


def test_memory_store_counts_saves():
    store = MemoryBestScore(5)
    store.save_best(9)
    assert store.load_best() == 9
    assert store.saves == 1
