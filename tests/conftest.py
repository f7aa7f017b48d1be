from textwrap import dedent

import pytest


APP_TSX = dedent(
	"""
	import React from 'react';
	import { Button, Card } from 'ui-library';
	import { useEffect } from 'react';

	function App() {
		return (
			<div>
				<Button>Click me</Button>
				<Card>Content</Card>
			</div>
		);
	}

	export default App;
	"""
)

HEADER_TSX = dedent(
	"""
	import React from 'react';
	import { Navbar, Container } from 'ui-library';
	import { useState } from 'react';

	function Header() {
		return (
			<Navbar>
				<Container>Header content</Container>
			</Navbar>
		);
	}

	export default Header;
	"""
)

FOOTER_TSX = dedent(
	"""
	import React from 'react';
	import { Container } from 'ui-library';

	function Footer() {
		return <Container>Footer content</Container>;
	}

	export default Footer;
	"""
)

BROKEN_TSX = dedent(
	"""
	import React from 'react';
	import { Modal } from 'ui-library'

	function Broken() {
		return (
			<Modal>
				This file has syntax errors
			</Modal
		);
	}
	"""
)


@pytest.fixture
def sample_project(tmp_path):
	(tmp_path / "src").mkdir()
	(tmp_path / "components").mkdir()
	(tmp_path / "src" / "app.tsx").write_text(APP_TSX)
	(tmp_path / "components" / "header.tsx").write_text(HEADER_TSX)
	(tmp_path / "components" / "footer.tsx").write_text(FOOTER_TSX)
	return tmp_path


@pytest.fixture
def broken_source():
	return BROKEN_TSX
