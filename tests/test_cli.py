from sveltify.cli import main
from sveltify.transpiler import Transpiler

SOURCE = """export default function Hello({ name }) {
  return (
    <h1 className="title">{name}</h1>
  );
}
"""


def test_main_writes_svelte_output(tmp_path):
    source_path = tmp_path / "in.tsx"
    target_path = tmp_path / "out.svelte"
    source_path.write_text(SOURCE, encoding="utf-8")

    assert main([str(source_path), str(target_path)]) == 0
    written = target_path.read_text(encoding="utf-8")
    assert written == Transpiler().transpile_component(SOURCE)
    assert written.startswith('<script lang="ts">')


def test_main_default_paths(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "input.tsx").write_text(SOURCE, encoding="utf-8")

    assert main([]) == 0
    written = (tmp_path / "output.svelte").read_text(encoding="utf-8")
    assert 'class="title"' in written


def test_main_missing_input(tmp_path, capsys):
    missing = tmp_path / "nope.tsx"
    target = tmp_path / "out.svelte"
    assert main([str(missing), str(target)]) == 1
    assert "Error" in capsys.readouterr().err
    assert not target.exists()


def test_main_unbalanced_source(tmp_path, capsys):
    source_path = tmp_path / "bad.tsx"
    target = tmp_path / "out.svelte"
    source_path.write_text("function A() { return (<div> }", encoding="utf-8")

    assert main([str(source_path), str(target)]) == 1
    assert "Error" in capsys.readouterr().err
    assert not target.exists()