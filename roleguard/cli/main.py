"""Main CLI application using Cyclopts.

Read-only inspection of the role policy: no command changes any state.
"""

import cyclopts

from roleguard.cli.commands import config, policy

app = cyclopts.App(
    name="roleguard",
    help="Role-based authorization policy for the asset inventory",
)

app.command(policy.roles, name="roles")
app.command(policy.check, name="check")
app.command(policy.clamp, name="clamp")
app.command(policy.rank, name="rank")
app.command(policy.matrix, name="matrix")
app.command(config.app, name="config")
