"""Parallel directory reads with a capacity ceiling.

Directories are read on a thread pool, but sections and their
diagnostics come back in name order, so the output is the same as a
sequential run.
"""

from myls import BufferedDiagnosticReporter, Lister, render_lines


reporter = BufferedDiagnosticReporter()
lister = Lister.from_local(reporter=reporter, workers=4, max_entries=100)

listing = lister.list(["/usr/bin", "/etc", "/tmp"])

for section in listing.sections:
    # Overflow warnings belong to the section that produced them
    for message in section.diagnostics:
        print(message)
    print(f"{section.path}: {len(section.entries)} entries")

print("\n".join(render_lines(listing)))
print("\n".join(reporter.messages))
