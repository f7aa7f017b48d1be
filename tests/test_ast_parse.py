from textwrap import dedent

from importy.ast_parse import (
	DefaultSpecifier,
	NamedSpecifier,
	NamespaceSpecifier,
	ParseSuccess,
	parse_source,
)


def test_parse_import_kinds():
	code = dedent(
		"""
		import React from 'react';
		import * as UI from "ui-library";
		import { Button, Card as Panel } from 'ui-library';
		import Theme, { useTheme } from 'ui-library/theme';
		import 'ui-library/styles.css';
		"""
	)
	outcome = parse_source(code)
	assert isinstance(outcome, ParseSuccess)
	assert not outcome.recovered

	imports = sorted(outcome.program.imports, key=lambda d: d.line)
	assert [d.source for d in imports] == [
		"react",
		"ui-library",
		"ui-library",
		"ui-library/theme",
		"ui-library/styles.css",
	]
	assert [d.line for d in imports] == [2, 3, 4, 5, 6]
	assert imports[0].specifiers == (DefaultSpecifier(local="React"),)
	assert imports[1].specifiers == (NamespaceSpecifier(local="UI"),)
	assert imports[2].specifiers == (
		NamedSpecifier(imported="Button", local="Button"),
		NamedSpecifier(imported="Card", local="Panel"),
	)
	assert imports[3].specifiers == (
		DefaultSpecifier(local="Theme"),
		NamedSpecifier(imported="useTheme", local="useTheme"),
	)
	assert imports[4].specifiers == ()


def test_parse_typescript_and_jsx():
	code = dedent(
		"""
		import type { Props } from 'ui-library';
		import { Button } from 'ui-library';

		interface State { open: boolean }

		export const App = (props: Props) => <Button {...props} />;
		"""
	)
	outcome = parse_source(code)
	assert isinstance(outcome, ParseSuccess)
	names = [s.imported for d in outcome.program.imports for s in d.specifiers]
	assert names == ["Props", "Button"]


def test_angle_bracket_assertion_uses_fallback_grammar():
	code = dedent(
		"""
		import { Config } from 'ui-library';

		const value = <Config>loadConfig();
		"""
	)
	outcome = parse_source(code)
	assert isinstance(outcome, ParseSuccess)
	assert not outcome.recovered
	assert outcome.program.imports[0].specifiers == (
		NamedSpecifier(imported="Config", local="Config"),
	)


def test_broken_source_is_recovered():
	code = dedent(
		"""
		import { Modal } from 'ui-library'

		function Broken() {
			return (
				<Modal>
					oops
				</Modal
			);
		}
		"""
	)
	outcome = parse_source(code)
	assert isinstance(outcome, ParseSuccess)
	assert outcome.recovered
	assert outcome.error_count > 0
	sources = [d.source for d in outcome.program.imports]
	assert "ui-library" in sources


def test_require_style_import_is_not_a_declaration():
	outcome = parse_source("import lib = require('ui-library');\n")
	assert isinstance(outcome, ParseSuccess)
	assert all(d.specifiers == () for d in outcome.program.imports)


def test_empty_source():
	outcome = parse_source("")
	assert isinstance(outcome, ParseSuccess)
	assert outcome.program.imports == []
