"""Ports (interfaces) handlers depend on"""
