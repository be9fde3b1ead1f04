from unittest import TestCase

from mock import Mock, patch
from parameterized import parameterized

from gradle_wrapper_tools.execution_mode import ExecutionMode, ResolverConfig
from gradle_wrapper_tools.gradle_wrapper.daemon_jvm import DaemonJvmReader
from gradle_wrapper_tools.gradle_wrapper.java_constraint import (
    JavaConstraintResolver,
    get_java_constraint,
    parse_gradle_version,
)

DAEMON_JVM = """#This file is generated by updateDaemonJvm
toolchainVersion=999
"""


class TestJavaConstraintResolver(TestCase):
    @patch("gradle_wrapper_tools.os_utils.OSUtils")
    def setUp(self, MockOSUtils):
        self.mock_os_utils = MockOSUtils.return_value
        self.mock_os_utils.dirname.side_effect = lambda p: p.rpartition("/")[0]
        self.mock_os_utils.joinpath.side_effect = lambda *args: "/".join(a for a in args if a)
        self.mock_os_utils.read_file.return_value = None
        self.docker = ResolverConfig(execution_mode=ExecutionMode.DOCKER)

    def test_returns_java_8_for_global_mode(self):
        resolver = JavaConstraintResolver(os_utils=self.mock_os_utils)
        self.assertEqual(resolver.get_java_constraint("4", ""), "^8.0.0")

    @parameterized.expand([(ExecutionMode.GLOBAL,), (ExecutionMode.INSTALL,), (ExecutionMode.HERMIT,)])
    def test_ignores_gradle_version_outside_docker(self, mode):
        resolver = JavaConstraintResolver(config=ResolverConfig(mode), os_utils=self.mock_os_utils)
        for gradle_version in [None, "", "4.9", "7.0.1", "8.0.1"]:
            self.assertEqual(resolver.get_java_constraint(gradle_version, ""), "^8.0.0")

    @parameterized.expand(
        [
            (None, "^11.0.0"),
            ("", "^11.0.0"),
            ("not a version", "^11.0.0"),
            ("4.9", "^8.0.0"),
            ("2.0", "^8.0.0"),
            ("5.0", "^11.0.0"),
            ("6.0", "^11.0.0"),
            ("6.9.4", "^11.0.0"),
            ("7.0", "^16.0.0"),
            ("7.0.1", "^16.0.0"),
            ("7.2", "^16.0.0"),
            ("7.3.0", "^17.0.0"),
            ("8.0.1", "^17.0.0"),
            ("8.8", "^17.0.0"),
        ]
    )
    def test_uses_compatibility_table_in_docker_mode(self, gradle_version, expected):
        resolver = JavaConstraintResolver(config=self.docker, os_utils=self.mock_os_utils)
        self.assertEqual(resolver.get_java_constraint(gradle_version, ""), expected)

    @parameterized.expand(
        [
            ("8.8", ExecutionMode.GLOBAL),
            ("8.8", ExecutionMode.DOCKER),
            ("4.9", ExecutionMode.DOCKER),
            (None, ExecutionMode.DOCKER),
            (None, ExecutionMode.GLOBAL),
        ]
    )
    def test_daemon_jvm_toolchain_wins(self, gradle_version, mode):
        self.mock_os_utils.read_file.return_value = DAEMON_JVM
        resolver = JavaConstraintResolver(config=ResolverConfig(mode), os_utils=self.mock_os_utils)
        self.assertEqual(resolver.get_java_constraint(gradle_version, "./gradlew"), "^999.0.0")

    def test_probes_properties_next_to_wrapper(self):
        resolver = JavaConstraintResolver(config=self.docker, os_utils=self.mock_os_utils)
        resolver.get_java_constraint("7.3.0", "sub/gradlew")
        self.mock_os_utils.read_file.assert_called_once_with("sub/gradle/gradle-daemon-jvm.properties", "utf8")

    def test_falls_back_when_toolchain_version_is_empty(self):
        self.mock_os_utils.read_file.return_value = "toolchainVersion=\n"
        resolver = JavaConstraintResolver(config=self.docker, os_utils=self.mock_os_utils)
        self.assertEqual(resolver.get_java_constraint("7.3.0", "gradlew"), "^17.0.0")

    def test_uses_given_daemon_jvm_reader(self):
        reader = Mock(spec=DaemonJvmReader)
        reader.toolchain_version.return_value = "21"
        resolver = JavaConstraintResolver(config=self.docker, daemon_jvm_reader=reader)
        self.assertEqual(resolver.get_java_constraint("6.0", "a/gradlew"), "^21.0.0")
        reader.toolchain_version.assert_called_once_with("a/gradlew")

    def test_is_idempotent(self):
        resolver = JavaConstraintResolver(config=self.docker, os_utils=self.mock_os_utils)
        results = {resolver.get_java_constraint("7.0.1", "gradlew") for _ in range(3)}
        self.assertEqual(results, {"^16.0.0"})

    def test_module_function_passes_config(self):
        self.assertEqual(get_java_constraint("7.0.1", "", config=self.docker, os_utils=self.mock_os_utils), "^16.0.0")
        self.assertEqual(get_java_constraint("7.0.1", "", os_utils=self.mock_os_utils), "^8.0.0")


class TestParseGradleVersion(TestCase):
    @parameterized.expand([(None,), ("",), ("latest",), (7,)])
    def test_returns_none_for_unknown_versions(self, gradle_version):
        self.assertIsNone(parse_gradle_version(gradle_version))

    def test_treats_missing_components_as_zero(self):
        self.assertEqual(str(parse_gradle_version("4.9")), "4.9.0")
        self.assertEqual(str(parse_gradle_version("8")), "8.0.0")

    def test_orders_patch_versions(self):
        self.assertLess(parse_gradle_version("7.0.1"), parse_gradle_version("7.3.0"))
        self.assertGreater(parse_gradle_version("7.10"), parse_gradle_version("7.3"))
