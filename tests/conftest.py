"""Shared test fixtures for markdown-split tests."""

import pytest


@pytest.fixture
def sample_markdown():
    """Return sample markdown content with multiple heading levels."""
    return """# Getting Started

Welcome to the documentation.

## Installation

Install with pip:

```bash
# install the package
pip install my-package
```

## Configuration

### Basic Config

Set environment variables:

- `API_KEY`: Your API key
- `DEBUG`: Enable debug mode

### Advanced Config

For production use, configure the following:

```yaml
server:
  host: 0.0.0.0
  port: 8080
```

## API Reference

### Authentication

Use Bearer tokens for API calls.

### Endpoints

#### GET /users

Returns a list of users.

#### POST /users

Create a new user.
"""


@pytest.fixture
def sample_translated_chapter():
    """Return a translated chapter that keeps the original headings in HTML comments."""
    return """<!-- Translated from the installation chapter -->

<!--
## Installation
-->

## インストール

最初の手順は、Rustをインストールすることです。

> ### コマンドラインの記法
>
> 読者が入力するべき行は、全て`$`で始まります。

<!--
### Installing `rustup` on Linux or macOS
-->

### LinuxとmacOSに`rustup`をインストールする

```console
$ curl --proto '=https' --tlsv1.2 https://sh.rustup.rs -sSf | sh
```

### トラブルシューティング

```console
$ rustc --version
```
"""


@pytest.fixture
def sample_headingless():
    """Return markdown content with no headings."""
    return """This is a document without any markdown headings.

It just has regular paragraphs of text explaining things.

There are multiple paragraphs here, but no headers at all.
"""


@pytest.fixture
def sample_file(tmp_path, sample_markdown):
    """Write the sample markdown to a file and return its path."""
    path = tmp_path / "README.md"
    path.write_text(sample_markdown, encoding="utf-8")
    return str(path)
