"""Shared support code packaged with every Lambda handler."""
