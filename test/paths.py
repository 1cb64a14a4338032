# python
"""
Paths module behavioral tests (existence and kind probing).

Scope
- Validate file/dir/filepath kinds against a temporary directory tree.
- Validate fault kinds (not found, wrong kind, access) and their context options.

Conventions
- Test method names follow CamelCase per project convention.
- Every test works inside its own TemporaryDirectory, used as the current directory.
"""

from __future__ import annotations

import contextlib
import errno
import os
import tempfile
import unittest
from unittest import TestCase

from procargs import (
    validate_path,
    OptionType,
    PathError,
    PathNotFoundError,
    WrongPathKindError,
    PathAccessError,
    FaultCode,
)


class TestValidatePath(TestCase):
    """Behavioral tests for validate_path()."""

    def setUp(self):
        self.root = self.enterContext(tempfile.TemporaryDirectory())
        self.enterContext(contextlib.chdir(self.root))
        os.mkdir("folder")
        with open("notes.txt", "w") as stream:
            stream.write("notes")

    def testExistingFileAccepted(self):
        self.assertIs(validate_path("notes.txt", "-file=notes.txt", "file"), True)

    def testExistingDirectoryAccepted(self):
        self.assertIs(validate_path("folder", "-dir=folder", "dir"), True)

    def testAbsolutePathAccepted(self):
        self.assertTrue(validate_path(os.path.join(self.root, "folder"), "-dir=...", "dir"))

    def testOptionTypeKindsAccepted(self):
        self.assertTrue(validate_path("folder", "-dir=folder", OptionType.DIR))
        self.assertTrue(validate_path("notes.txt", "-file=notes.txt", OptionType.FILE))
        self.assertTrue(validate_path("folder/new.txt", "-out=folder/new.txt", OptionType.FILEPATH))

    def testMissingFileRaisesNotFound(self):
        with self.assertRaises(PathNotFoundError) as context:
            validate_path("missing.txt", "-file=missing.txt", "file")
        self.assertIs(context.exception.options["code"], FaultCode.PATH_NOT_FOUND)
        self.assertEqual(context.exception.options["path"], "missing.txt")
        self.assertIn("-file=missing.txt", context.exception.message)

    def testMissingParentRaisesNotFound(self):
        with self.assertRaises(PathNotFoundError):
            validate_path("nowhere/deeper", "-dir=nowhere/deeper", "dir")

    def testPathThroughFileRaisesNotFound(self):
        with self.assertRaises(PathNotFoundError):
            validate_path("notes.txt/inner", "-dir=notes.txt/inner", "dir")

    def testDirectoryAsFileRaisesWrongKind(self):
        with self.assertRaises(WrongPathKindError) as context:
            validate_path("folder", "-file=folder", "file")
        self.assertIs(context.exception.options["code"], FaultCode.WRONG_PATH_KIND)
        self.assertIsInstance(context.exception, PathError)

    def testFileAsDirectoryRaisesWrongKind(self):
        with self.assertRaises(WrongPathKindError):
            validate_path("notes.txt", "-dir=notes.txt", "dir")

    def testFilepathProbesContainingDirectory(self):
        # the final segment need not exist
        self.assertTrue(validate_path("folder/report.csv", "-output=folder/report.csv", "filepath"))

    def testFilepathWithoutDirectoryUsesCurrentDirectory(self):
        self.assertTrue(validate_path("report.csv", "-output=report.csv", "filepath"))

    def testFilepathWithMissingDirectoryRaisesNotFound(self):
        with self.assertRaises(PathNotFoundError) as context:
            validate_path("absent/report.csv", "-output=absent/report.csv", "filepath")
        self.assertEqual(context.exception.options["path"], "absent")

    def testFilepathWhoseParentIsFileRaisesWrongKind(self):
        with self.assertRaises(WrongPathKindError):
            validate_path("notes.txt/report.csv", "-output=notes.txt/report.csv", "filepath")

    def testOtherOSFailureRaisesAccessError(self):
        candidate = "x" * (os.pathconf(".", "PC_NAME_MAX") + 1)
        with self.assertRaises(PathAccessError) as context:
            validate_path(candidate, "-dir=" + candidate, "dir")
        self.assertIs(context.exception.options["code"], FaultCode.PATH_ACCESS)
        self.assertIsInstance(context.exception.__cause__, OSError)
        self.assertEqual(context.exception.__cause__.errno, errno.ENAMETOOLONG)
        self.assertIsInstance(context.exception, PathError)

    def testIndexMakesMessagePositionFirst(self):
        with self.assertRaises(PathNotFoundError) as context:
            validate_path("missing", "-dir=missing", "dir", index=2)
        self.assertIn("second position", context.exception.message)
        self.assertEqual(context.exception.options["index"], 2)

    def testUnknownKindIsProgrammingError(self):
        with self.assertRaises(TypeError):
            validate_path("folder", "-x=folder", "directory")


if __name__ == "__main__":
    unittest.main()
