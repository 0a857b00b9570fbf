"""
Test suite for Merchant's Guide

Contains:
- tests/unit/          : Unit tests for codec, resolver, session and contracts
"""
