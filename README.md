# centy

Building blocks for a local-first issue and documentation tracker. Issues,
docs and attachments live as plain files under a `.centy/` directory inside
your project, so they travel with the repository and merge cleanly. This
package reads and interprets those files, and keeps issue display numbers
consistent.

## Layout on disk

```
.centy/
  config.json
  issues/<uuid>/issue.md
  issues/<uuid>/metadata.json
  issues/<uuid>/assets/
  assets/
  docs/<slug>.md
```

Issue folders are named by UUID; legacy four-digit folders such as `0001`
are still recognised (`centy.issue_id.is_valid_issue_folder`). Each issue
carries a human-readable display number in its metadata.

## Installing

```
pip install .
```

There are no dependencies beyond the standard library.

## Modules

- `centy.priority`: `validate_priority`, `default_priority`,
  `priority_label`, `label_to_priority`, `migrate_string_priority` and
  `PriorityError`.
- `centy.status`: `validate_status`, which returns whether a status is in
  the allowed list and logs a warning (without raising) when it is not.
- `centy.issue_id`: `is_uuid`, `is_legacy_number`, `is_valid_issue_folder`,
  `generate_issue_id` and `short_id` (the first eight characters).
- `centy.metadata`: `IssueMetadata` (`create`, `from_dict`, `to_dict`,
  `from_json`, `to_json`), `MetadataError` and `now_iso`.
- `centy.reconcile`: `reconcile_display_numbers` and
  `get_next_display_number`.
- `centy.config`: `CentyConfig`, `CustomFieldDefinition`, `LlmConfig`,
  `ConfigError`, `get_centy_path`, `read_config` and `write_config`.
- `centy.docs`: `Doc`, `DocMetadata`, `DocError`, `InvalidSlugError`,
  `slugify`, `validate_slug`, `escape_yaml_string`,
  `generate_doc_content`, `parse_doc_content` and `read_doc`.
- `centy.issues`: `Issue`, `IssueMetadataFlat`, `IssueFormatError`,
  `parse_issue_md`, `generate_issue_md`, `read_issue` and
  `get_next_issue_number`.
- `centy.assets`: `AssetScope`, `AssetInfo`, `AssetError`,
  `compute_binary_hash`, `get_mime_type`, `sanitize_filename`,
  `describe_asset` and `scan_assets`.

## Using it

Priorities are numbers, with 1 the highest. Labels depend on how many levels
the project configures:

```python
from centy.priority import priority_label, label_to_priority, default_priority

priority_label(1, 3)          # "high"
priority_label(2, 5)          # "P2"
label_to_priority("low", 4)   # 4
default_priority(3)           # 2
```

Read and write a project's configuration:

```python
from centy.config import read_config, write_config, CentyConfig

config = read_config("path/to/project")   # None if there is no config.json
if config is None:
    config = CentyConfig()                 # 3 levels, states open/in-progress/closed
print(config.allowed_states, config.priority_levels, config.effective_version())
write_config("path/to/project", config)   # the .centy directory must exist
```

Issue metadata keeps accepting the old string priorities (`"high"`,
`"medium"`, `"low"`) and turns them into numbers:

```python
from centy.metadata import IssueMetadata

meta = IssueMetadata.from_json(
    '{"status": "open", "priority": "high", "createdAt": "2024-01-01", "updatedAt": "2024-01-01"}'
)
meta.priority        # 1
meta.display_number  # 0 when the field is absent
```

Read a whole issue from its folder:

```python
from centy.issues import read_issue

issue = read_issue("path/to/project/.centy/issues/<uuid>", "<uuid>")
issue.title, issue.description, issue.metadata.status
```

Custom field values that are not strings come back as compact JSON text.

When several people create issues offline, display numbers can collide.
Reconciliation keeps the oldest issue's number (by `createdAt`) and moves the
others to the next free numbers above the current maximum; issues without a
display number each receive a fresh one:

```python
from centy.reconcile import reconcile_display_numbers, get_next_display_number

moved = reconcile_display_numbers("path/to/project/.centy/issues")
next_number = get_next_display_number("path/to/project/.centy/issues")
```

Docs are Markdown files with a small frontmatter block:

```python
from centy.docs import slugify, read_doc

slugify("Getting Started Guide")   # "getting-started-guide"
doc = read_doc("path/to/project/.centy/docs/getting-started-guide.md", "getting-started-guide")
doc.title, doc.content, doc.metadata.created_at
```

Images and videos attached to issues are listed by `centy.assets.scan_assets`,
which describes every regular file in a directory, ordered by name, with its
SHA-256 hash, size and MIME type (`application/octet-stream` for extensions
it does not know). `sanitize_filename` rejects empty names, path separators,
`..`, hidden files and names longer than 255 bytes.

## What it does not do

The package has no command-line program and no server. It does not create,
update or delete issues, docs or assets on its own: it provides the parsing,
rendering, validation and numbering pieces (`generate_issue_md`,
`generate_doc_content`, `IssueMetadata.to_json`, `get_next_display_number`,
`sanitize_filename` and the like) from which such operations are built, and
the writing of files beyond `config.json` and reconciled `metadata.json` is
left to the caller. It does not initialise a `.centy` directory, keep a
project manifest or track a list of projects.

## Running the tests

```
pip install ".[test]"
pytest
```