"""Client library for the Aria Automation control plane.

Negotiates authenticated sessions against the identity and IaaS login
endpoints and drives asynchronous machine operations to completion.
"""

__version__ = "0.1.0"
