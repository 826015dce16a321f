# vaxlab

vaxlab works with the records of a vaccine research lab kept in a SQLite
database: research projects, vaccines, equipment and employees. It is a
library; every function takes an open `sqlite3.Connection`.

## Modules

- `vaxlab.research`
  - `create_schema(connection)` creates the `RECHERCHES` and `VACCINS`
    tables if they are missing.
  - `Recherche` is one research record (id, name, type, date, status,
    employee id, state).
  - `ResearchRepository` adds, updates, deletes and fetches records
    (`add`, `update`, `delete`, `get`), lists them (`list_all`, `list_ids`),
    sorts them (`sorted_by_name`, `sorted_by_type`, `sorted_by_status`) and
    searches one column for a substring (`search`). Listings come back as a
    `Table` with `headers` and `rows`.
  - `retranslate_headers(headers, translations)` translates the first six
    research headers using a mapping of translations.
- `vaxlab.vaccines` — `Vaccin` and `VaccineRepository` (`add`, `update`,
  `delete`, `list_all`) for the `VACCINS` table.
- `vaxlab.stats` — figures for charts: `research_status_shares` (share of
  research records per status, as `PieSlice` values), `equipment_total`,
  `equipment_counts_by`, `quantity_by_type` and `state_by_type`.
- `vaxlab.rfid` — `find_arduino_port` picks a serial port that looks like an
  Arduino, `open_serial` opens it at 9600 baud 8N1, and `RfidGate` reads
  badge UIDs from the reader (`poll`, `handle_line`), looks them up in the
  `EMPLOYE` table and answers the reader (`send_message`). Callables in
  `RfidGate.on_authorized` are called with each authorised UID.
- `vaxlab.translations` — `load_translations(path)` reads a JSON catalogue
  keyed by language; `TranslationCatalog` lists its languages, gives the
  interface texts of a language, translates table headers and "Funded" cells,
  and switches the current language (`switch_language`).
- `vaxlab.export` — `table_to_html` renders a table as an HTML report with
  numbered rows, `export_html` writes it to a file (adding `.html` when the
  name has no extension), and `normalise_export_path` adds `.pdf` to a name
  without an extension.
- `vaxlab.employees` — `validate_employee` checks an `EmployeeInput` form and
  raises `ValueError` with the first problem; `search_column` and
  `sort_column` map form choices to columns; `employee_stats` counts
  employees by gender, speciality or salary band; `clean_uid`, `check_uid`,
  `assign_uid` and `list_employees` handle badge UIDs.

A research record's status is one of `En Cours`, `Termine` or `Annule`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
import sqlite3
from datetime import date

from vaxlab.research import Recherche, ResearchRepository, create_schema

connection = sqlite3.connect("lab.db")
create_schema(connection)
repo = ResearchRepository(connection)
repo.add(Recherche(1, "Flu study", "Clinical", date(2024, 1, 15), "En Cours", 7))
table = repo.sorted_by_name()
print(table.headers)
for row in table.rows:
    print(row)
```

## What it does not do

- There is no command-line program and no graphical interface; use the
  modules from Python.
- `create_schema` only creates `RECHERCHES` and `VACCINS`. The `EQUIPEMENT`
  and `EMPLOYE` tables read by `vaxlab.stats`, `vaxlab.rfid` and
  `vaxlab.employees` must already exist in the database.
- There is no repository for adding, updating or deleting equipment or
  employees, apart from assigning a badge UID.
- Reports are written as HTML; nothing produces PDF files.
- There is no lookup of vaccine providers over the network.