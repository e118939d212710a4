import pytest

from adfmark.config import CONFIGURATION, ApplicationConfiguration


@pytest.fixture(autouse=True)
def mock_configuration(monkeypatch, tmp_path):
    # NOTE: keep the user's environment and config file out of the tests.
    monkeypatch.setenv('XDG_CONFIG_HOME', str(tmp_path / 'xdg'))
    monkeypatch.delenv('ADFMARK_CONFIG_FILE', raising=False)
    monkeypatch.delenv('ADFMARK_LOG_FILE', raising=False)
    monkeypatch.delenv('ADFMARK_LOG_LEVEL', raising=False)

    config = ApplicationConfiguration(log_file=None, log_level='WARNING')

    token = CONFIGURATION.set(config)

    yield config

    CONFIGURATION.reset(token)


@pytest.fixture
def work_item_markdown_description():
    """Markdown description using every construct the converter supports, plus a few it skips."""
    return """# Release checklist

Ship the **new importer** with *care*. Run `make test` before merging.

## Steps

1. Build the wheel
2. Upload it
   - to the staging index
   - to the production index

```python
print("hello")
```

> Remember to tag the release.

---

<div>internal notes</div>

See [the docs](https://example.com/docs) for details."""


@pytest.fixture
def work_item_adf_description():
    """An ADF description as returned by the Jira REST API, including nodes the converter does not know."""
    return {
        'type': 'doc',
        'version': 1,
        'content': [
            {
                'type': 'heading',
                'attrs': {'level': 2.0},
                'content': [{'type': 'text', 'text': 'Summary'}],
            },
            {
                'type': 'paragraph',
                'content': [
                    {'type': 'text', 'text': 'Owner: '},
                    {'type': 'mention', 'attrs': {'id': '123', 'text': '@Test User'}},
                    {'type': 'text', 'text': 'see '},
                    {
                        'type': 'text',
                        'text': 'ticket',
                        'marks': [{'type': 'link', 'attrs': {'href': 'https://example.com/T-1'}}],
                    },
                ],
            },
            {
                'type': 'panel',
                'attrs': {'panelType': 'info'},
                'content': [
                    {'type': 'paragraph', 'content': [{'type': 'text', 'text': 'Heads up'}]},
                ],
            },
            {
                'type': 'bulletList',
                'content': [
                    {
                        'type': 'listItem',
                        'content': [{'type': 'paragraph', 'content': [{'type': 'text', 'text': 'first'}]}],
                    },
                    {
                        'type': 'listItem',
                        'content': [
                            {
                                'type': 'paragraph',
                                'content': [
                                    {'type': 'text', 'text': 'second', 'marks': [{'type': 'strong'}]},
                                ],
                            }
                        ],
                    },
                ],
            },
            {
                'type': 'codeBlock',
                'attrs': {'language': 'bash'},
                'content': [{'type': 'text', 'text': 'echo hi'}],
            },
        ],
    }
