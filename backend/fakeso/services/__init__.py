# fakeso/services/__init__.py
"""
Service layer.

Every function maps one persistence operation to an ``Ok`` / ``Err`` result
(see fakeso.core.result) so that nothing raised by the database crosses into
the routers. The one exception is ``message_service.get_messages``, which
degrades to an empty list instead.

Modules:
- user_service: account creation, lookup, login, deletion and updates
- message_service: storing and listing chat messages
"""
