import sys
from unittest.mock import MagicMock

# pywin32 and winreg only exist on Windows. Elsewhere they are replaced by
# mocks so the modules under test import; tests patch the calls they need.
try:
    import win32print  # noqa: F401
except ImportError:
    pywintypes = MagicMock(name="pywintypes")
    pywintypes.error = type("error", (Exception,), {})
    pywintypes.com_error = type("com_error", (Exception,), {})
    win32com = MagicMock(name="win32com")
    sys.modules.update({
        "pywintypes": pywintypes,
        "pythoncom": MagicMock(name="pythoncom"),
        "win32api": MagicMock(name="win32api"),
        "win32print": MagicMock(name="win32print"),
        "win32com": win32com,
        "win32com.client": win32com.client,
    })

try:
    import winreg  # noqa: F401
except ImportError:
    sys.modules["winreg"] = MagicMock(name="winreg")
