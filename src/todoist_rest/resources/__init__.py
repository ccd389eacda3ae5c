"""
Resource modules.

- models.py: records (Project, Task, Section, Label) and write-side params
- projects.py / tasks.py / sections.py / labels.py: CRUD call sites
"""
