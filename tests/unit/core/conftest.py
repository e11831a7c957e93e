"""Shared fixtures for core unit tests"""

import pytest


SAMPLE_MD = """\
# Heading 1

A paragraph with **bold** text.

## Heading 2

- item one
- item two

```python
print("hello")
```

---

Footer paragraph.
"""

SAMPLE_TASKS_MD = """\
- [x] done
- [ ] todo
"""


@pytest.fixture(name="sample_md")
def sample_md_fixture():
    return SAMPLE_MD


@pytest.fixture(name="sample_tasks_md")
def sample_tasks_md_fixture():
    return SAMPLE_TASKS_MD
