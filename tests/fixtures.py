"""Sources of small command libraries used across the tests."""

SCENARIO_A = {
    'a/__init__.py': """
        from ipcstub.ipc import IpcCommand


        class Baz(IpcCommand):
            def execute(self, call, result):
                pass
    """,
    'a/b/__init__.py': """
        from ipcstub.ipc import IpcCommand


        class Foo(IpcCommand):
            def execute(self, call, result):
                pass
    """,
    'a/b/c.py': """
        from ipcstub.ipc import IpcCommand


        class Bar(IpcCommand):
            def execute(self, call, result):
                pass
    """,
}

SHOP = {
    'shop/__init__.py': '',
    'shop/base.py': """
        import abc
        import enum
        from ipcstub.ipc import IpcCommand
        from typing import Protocol


        class AbstractShopCommand(IpcCommand):
            @abc.abstractmethod
            def validate(self, call):
                pass


        class Color(enum.Enum):
            RED = 1


        class Reader(Protocol):
            def execute(self, call, result):
                pass


        IpcCommand.register(Color)
        IpcCommand.register(Reader)


        class Helper:
            pass


        HELPER_ALIAS = Helper
    """,
    'shop/users.py': """
        from ipcstub.ipc import (
            Deprecated,
            Description,
            IpcCommand,
            Param,
            Params,
            Return,
            Throw,
        )
        from shop.base import AbstractShopCommand


        @Description('Lists users')
        @Params(
            Param('limit', 'maximum number of users', type='int', optional=True, default='10'),
            Param('offset', 'index of the first user', type='int'),
        )
        @Return('users', 'list of user names')
        @Throw('PermissionError', 'when the caller may not list users')
        class ListUsers(IpcCommand):
            def execute(self, call, result):
                result['users'] = []


        @Deprecated()
        @Description('Deletes a user')
        @Param('id', 'the user id')
        class DeleteUser(AbstractShopCommand):
            def validate(self, call):
                pass

            def execute(self, call, result):
                pass


        class NotACommand:
            def execute(self, call, result):
                pass
    """,
    'shop/orders/__init__.py': '',
    'shop/orders/checkout.py': """
        from ipcstub.ipc import Description, IpcCommand


        @Description('Checks out the cart')
        class Checkout(IpcCommand):
            def execute(self, call, result):
                result['order'] = 1
    """,
    'shop/orders/optional.py': """
        import ipcstub_missing_dependency
        from ipcstub.ipc import IpcCommand


        class NeedsDependency(IpcCommand):
            def execute(self, call, result):
                pass
    """,
}

BILLING = {
    'billing/__init__.py': '',
    'billing/invoices.py': """
        from ipcstub.ipc import Description, IpcCommand


        @Description('Sends an invoice')
        class SendInvoice(IpcCommand):
            def execute(self, call, result):
                pass
    """,
}
