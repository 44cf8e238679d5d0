"""Meetapp: meetup organization API."""
