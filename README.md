# sarifkit

A small library for producing and reading SARIF 2.1.0 reports: the JSON
format that static analysis tools use to describe rules, results and
locations.

## Installing

```
pip install sarifkit
```

The package has no runtime dependencies. To run the tests, install the
`test` extra and run `pytest`:

```
pip install "sarifkit[test]"
pytest
```

## Writing a report

```python
import sys

from sarifkit.report import Version, new_report
from sarifkit.run import Run

report = new_report(Version.V2_1_0, True)

run = Run.with_information_uri("mytool", "https://tool.example.com")
report.add_run(run)

rule = run.add_rule("no-eval")
rule.with_description("Avoid eval").with_text_help("eval runs arbitrary code")

result = run.create_result_for_rule("no-eval")
result.level = "error"
result.message.text = "eval used here"

report.write(sys.stdout)          # compact JSON
report.write_file("out.sarif")    # indented JSON on disk
```

`new_report` takes a `Version` (or its string value) and whether to fill
in the `$schema` member; an unknown version raises `SarifError` when the
schema is asked for.

`Run.add_rule` gives back the driver's rule that already has that id, or
creates one. `Run.add_result` and `Run.create_result_for_rule` set each
result's `rule_index` from the driver's rules, and to `None` when no rule
has that id, so add the rule first. `Run.get_rule_by_id` and
`Run.get_result_by_rule_id` raise `LookupError` when nothing matches.

`Report.write` drops repeated artifact entries (the same object added
twice) from every run before it writes compact JSON. `Report.pretty_write`
writes JSON indented by two spaces without that step, and
`Report.write_file` writes that indented form to a file. Both accept text
or binary streams.

## Reading a report

```python
from sarifkit.report import SarifError, from_string, open_report

report = open_report("out.sarif")
driver = report.runs[0].tool.driver
print(driver.name, driver.information_uri)

try:
    open_report("missing.sarif")
except SarifError as err:
    print(err)
```

`from_string` and `from_bytes` load a report from JSON text. Unknown
members are ignored. Loading failures (a missing file, an unreadable
file, invalid JSON) raise `SarifError`.

## Building blocks

Every object is a dataclass with snake_case attributes that map to the
camelCase members of the format. Each has `to_dict()`, `to_json(indent=None)`
and the class method `from_dict(data)`. Empty optional members are left
out of the output; timestamps are `datetime` values written in RFC 3339
form.

- `sarifkit.properties`: `PropertyBag`, the free-form `properties` object
  that every other class inherits.
- `sarifkit.message`: `Message` and `MultiformatMessageString`.
- `sarifkit.regions`: `Region` (with `Region.simple(start_line, end_line)`),
  `Rectangle`, `Replacement`.
- `sarifkit.locations`: `PhysicalLocation`, `LogicalLocation`,
  `LocationRelationship`, `Node`, `SpecialLocations`.
- `sarifkit.rules`: `ReportingDescriptor`, `ReportingConfiguration`,
  `ReportingDescriptorReference`, `ToolComponentReference`,
  `TranslationMetadata`.
- `sarifkit.tool`: `Tool` (with `Tool.simple(driver_name)`) and
  `ToolComponent`, whose `add_rule` skips rules whose id is already there
  and returns the rule's index.
- `sarifkit.stacks`: `Stack`, `StackFrame`, `Suppression`.
- `sarifkit.notification`: `Notification`.
- `sarifkit.web`: `WebRequest`, `WebResponse`.
- `sarifkit.thread_flows`: `ThreadFlow`, `ThreadFlowLocation`.
- `sarifkit.provenance`: `ResultProvenance`, `VersionControlDetails`.
- `sarifkit.result`: `Result`.
- `sarifkit.automation`: `RunAutomationDetails`.
- `sarifkit.run`: `Run`.
- `sarifkit.report`: `Report`, `Version`, `SarifError`, `new_report`,
  `open_report`, `from_string` and `from_bytes`.

Properties can be attached to any object:

```python
from sarifkit.properties import PropertyBag

bag = PropertyBag()
bag.add_string("category", "security")
bag.add_integer("severity", 10)
run.attach_property_bag(bag)
```

`add_string`, `add_boolean` and `add_integer` raise `TypeError` for a
value of the wrong type; `add` takes any value.

## What it does not do

- Several parts of the format have no class of their own: artifacts,
  artifact locations and contents, invocations, locations inside results,
  code flows, graphs, graph traversals, attachments, fixes, addresses,
  exceptions, conversions and external property file references. These
  members hold any value you give them (plain dicts work), and a loaded
  report keeps them as plain JSON data.
- Reports are not checked against the SARIF schema.
- There is no command-line tool; the package is a library only.