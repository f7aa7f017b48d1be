from textwrap import dedent

from importy import extract
from importy.ast_parse import ParseFailure
from importy.extract import extract_imports, extract_imports_from_file, matches_library


def test_matches_library():
	assert matches_library("ui-library", "ui-library")
	assert matches_library("ui-library/Button", "ui-library")
	assert not matches_library("ui-library-extra", "ui-library")
	assert not matches_library("@scope/ui-library", "ui-library")
	assert matches_library("@scope/ui/button", "@scope/ui")


def test_default_namespace_and_named_classification():
	code = dedent(
		"""
		import X from "lib";
		import * as Y from "lib";
		import { Z } from "lib";
		"""
	)
	matches = extract_imports(code, "lib", "/p/a.ts")
	got = sorted((m.imported_name, m.local_name) for m in matches)
	assert got == [("*", "Y"), ("Z", "Z"), ("default", "X")]
	assert all(m.file == "/p/a.ts" for m in matches)
	assert sorted(m.line for m in matches) == [2, 3, 4]


def test_aliased_named_import_keeps_exported_name():
	matches = extract_imports("import { Button as Btn } from 'ui-library';", "ui-library", "a.tsx")
	assert len(matches) == 1
	assert matches[0].imported_name == "Button"
	assert matches[0].local_name == "Btn"
	assert matches[0].line == 1


def test_subpath_import_is_classified_like_top_level():
	code = dedent(
		"""
		import Button from 'ui-library/Button';
		import { debounce } from 'ui-library/utils';
		"""
	)
	matches = extract_imports(code, "ui-library", "a.tsx")
	assert sorted(m.imported_name for m in matches) == ["debounce", "default"]


def test_other_libraries_are_ignored():
	code = dedent(
		"""
		import React, { useState } from 'react';
		import 'ui-library';
		"""
	)
	assert extract_imports(code, "ui-library", "a.tsx") == []


def test_parse_failure_returns_no_matches(monkeypatch, caplog):
	monkeypatch.setattr(extract, "parse_source", lambda text: ParseFailure(diagnostic="boom"))
	assert extract_imports("import { A } from 'lib';", "lib", "bad.ts") == []
	assert "Skipping bad.ts" in caplog.text


def test_extract_from_file(tmp_path):
	p = tmp_path / "a.jsx"
	p.write_text("import { Button } from 'ui-library';\nexport default () => <Button />;\n")
	matches = extract_imports_from_file(str(p), "ui-library")
	assert [m.imported_name for m in matches] == ["Button"]
	assert matches[0].file == str(p)


def test_unreadable_file_returns_no_matches(tmp_path, caplog):
	assert extract_imports_from_file(str(tmp_path / "missing.ts"), "lib") == []
	assert "Error reading file" in caplog.text


def test_undecodable_file_returns_no_matches(tmp_path):
	p = tmp_path / "binary.js"
	p.write_bytes(b"\xff\xfe\x00import")
	assert extract_imports_from_file(str(p), "lib") == []
