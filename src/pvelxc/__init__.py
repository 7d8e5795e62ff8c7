"""pvelxc - manage LXC containers on a Proxmox VE node."""

__version__ = "0.1.0"
