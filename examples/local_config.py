from selcaps import SafariOptions

#
# This file gives you an overview of what a selcaps configuration is
# able to work with. It is executed by selcaps.Builder, which sets
# ``builder_args`` to the options passed to the builder.
#

# The kind of driver to build. Abbreviations ("SF", "CH") are accepted.
BROWSER = "SAFARI"

OPTIONS = SafariOptions(automatic_inspection=True,
                        accept_insecure_certs=True)

# Deprecated. Setting this together with OPTIONS is an error.
# CAPABILITIES = {"browser_name": "safari", "company:key": "value"}

# Only useful when running locally. When not set, the driver is
# looked up with Selenium Manager.
DRIVER_PATH = "/usr/bin/safaridriver"

SERVICE_ARGS = ["--diagnose"] if builder_args.get("diagnose") else None

# Set this to use an already running remote end instead of starting
# the driver locally.
REMOTE_URL = builder_args.get("remote_url")
