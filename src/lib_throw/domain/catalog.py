"""Long-tail error taxonomy.

Purpose
-------
Provide narrowly scoped, catchable error kinds for common application and
infrastructure failure areas. The names are classification labels only: no
kind implements behaviour for its subject domain.

Contents
--------
Every kind is a plain subclass declaration with a one-line summary. All of
them inherit the shared concerns from
:class:`lib_throw.domain.errors.ThrowException`, so a kind never needs code of
its own. Applications add named constructors by subclassing::

    class WebhookDeliveryFailed(WebhookException):
        @classmethod
        def failed(cls, url: str, status_code: int) -> "WebhookDeliveryFailed":
            return cls(f"Webhook delivery failed to '{url}': HTTP {status_code}")

System Role
-----------
Declared in dependency order (parents before children). Introspection over the
resulting tree lives in :mod:`lib_throw.domain.taxonomy`; the public import
path is :mod:`lib_throw.exceptions`.
"""

from __future__ import annotations

from .errors import RuntimeException


# =============================================================================
# Categories hanging directly off the base kinds
# =============================================================================


class AccessibilityException(RuntimeException):
    """Raised for accessibility requirement violations."""


class AdapterException(RuntimeException):
    """Raised for channel adapter failures."""


class AggregationException(RuntimeException):
    """Raised for data aggregation failures."""


class AnalyticsException(RuntimeException):
    """Raised for analytics tracking failures."""


class AnnotationException(RuntimeException):
    """Raised for annotation parsing errors."""


class ArchiveException(RuntimeException):
    """Raised for archive creation and extraction errors."""


class ArithmeticException(RuntimeException, ArithmeticError):
    """Raised for arithmetic errors."""


class AssetException(RuntimeException):
    """Raised for asset compilation and build errors."""


class AttributeException(RuntimeException):
    """Raised for attribute processing failures."""


class AuditException(RuntimeException):
    """Raised for audit logging failures."""


class BackupException(RuntimeException):
    """Raised for backup operation failures."""


class BadRequestException(RuntimeException):
    """Raised for malformed HTTP requests."""


class BatchException(RuntimeException):
    """Raised for batch operation failures."""


class BenchmarkException(RuntimeException):
    """Raised for benchmarking errors."""


class BillingException(RuntimeException):
    """Raised for billing and subscription errors."""


class BiometricException(RuntimeException):
    """Raised for biometric authentication errors."""


class BroadcastException(RuntimeException):
    """Raised for broadcasting failures."""


class BrokenPipeException(RuntimeException):
    """Raised when writing to a closed stream or socket."""


class BufferException(RuntimeException):
    """Raised for buffer overflow and underflow."""


class BuilderException(RuntimeException):
    """Raised for builder pattern errors."""


class BulkheadException(RuntimeException):
    """Raised for bulkhead isolation failures."""


class BurstException(RuntimeException):
    """Raised for burst limit violations."""


class BusinessRuleException(RuntimeException):
    """Raised for business rule violations."""


class CanaryException(RuntimeException):
    """Raised for canary deployment failures."""


class CastException(RuntimeException):
    """Raised when type casting fails."""


class CertificateException(RuntimeException):
    """Raised for SSL/TLS certificate errors."""


class ChannelException(RuntimeException):
    """Raised for communication channel errors."""


class CheckpointException(RuntimeException):
    """Raised for checkpoint creation failures."""


class ChecksumException(RuntimeException):
    """Raised for checksum verification failures."""


class CircuitBreakerException(RuntimeException):
    """Raised for circuit breaker state errors."""


class CloudStorageException(RuntimeException):
    """Raised for cloud storage failures."""


class CompensationException(RuntimeException):
    """Raised for compensation action failures."""


class ComplianceException(RuntimeException):
    """Raised for compliance violation errors."""


class ComponentException(RuntimeException):
    """Raised for component rendering issues."""


class CompressionException(RuntimeException):
    """Raised for data compression errors."""


class ConcurrencyException(RuntimeException):
    """Raised for concurrent operation failures."""


class ConcurrentModificationException(RuntimeException):
    """Raised when a collection is modified during iteration."""


class ConfigurationException(RuntimeException):
    """Raised for configuration errors."""


class ConflictException(RuntimeException):
    """Raised for resource conflicts."""


class ConnectionException(RuntimeException):
    """Raised for network connection errors."""


class ConsoleException(RuntimeException):
    """Raised for console command failures."""


class ContainerException(RuntimeException):
    """Raised for dependency injection container errors."""


class ContentDeliveryNetworkException(RuntimeException):
    """Raised for CDN operation failures."""


class ConversionException(RuntimeException):
    """Raised for data conversion errors."""


class CookieException(RuntimeException):
    """Raised for cookie operations failures."""


class CorruptedDataException(RuntimeException):
    """Raised for data corruption."""


class CorruptionException(RuntimeException):
    """Raised for data corruption detection."""


class CorsException(RuntimeException):
    """Raised for CORS policy violations."""


class CpuException(RuntimeException):
    """Raised for CPU resource errors."""


class CsvException(RuntimeException):
    """Raised for CSV parsing failures."""


class CurrencyException(RuntimeException):
    """Raised for currency conversion failures."""


class DashboardException(RuntimeException):
    """Raised for dashboard rendering errors."""


class DataIntegrityException(RuntimeException):
    """Raised for data integrity violations."""


class DataTableException(RuntimeException):
    """Raised for data table rendering errors."""


class DebugException(RuntimeException):
    """Raised for debug mode errors."""


class DecoratorException(RuntimeException):
    """Raised for decorator application errors."""


class DelegationException(RuntimeException):
    """Raised for delegation pattern failures."""


class DependencyException(RuntimeException):
    """Raised for dependency resolution failures."""


class DeploymentException(RuntimeException):
    """Raised for deployment operation failures."""


class DeprecatedException(RuntimeException):
    """Raised for deprecated functionality."""


class DiscountException(RuntimeException):
    """Raised for discount application failures."""


class DiskException(RuntimeException):
    """Raised for disk space and quota errors."""


class DnsException(RuntimeException):
    """Raised for DNS resolution failures."""


class DraftException(RuntimeException):
    """Raised for draft management errors."""


class DriverException(RuntimeException):
    """Raised for driver errors."""


class EncodingException(RuntimeException):
    """Raised for character encoding issues."""


class EncryptionException(RuntimeException):
    """Raised for encryption and decryption failures."""


class EndOfFileException(RuntimeException):
    """Raised when end of file or stream is reached unexpectedly."""


class EventException(RuntimeException):
    """Raised for event dispatching errors."""


class ExperimentException(RuntimeException):
    """Raised for A/B testing failures."""


class ExportException(RuntimeException):
    """Raised for data export errors."""


class ExtractException(RuntimeException):
    """Raised for data extraction failures."""


class FactoryException(RuntimeException):
    """Raised for factory creation failures."""


class FallbackException(RuntimeException):
    """Raised for fallback execution errors."""


class FeatureFlagException(RuntimeException):
    """Raised for feature flag errors."""


class FilesystemException(RuntimeException):
    """Raised for general filesystem errors."""


class FilterException(RuntimeException):
    """Raised for data filtering failures."""


class ForbiddenException(RuntimeException):
    """Raised for authorization failures."""


class GatewayException(RuntimeException):
    """Raised for API gateway errors."""


class GeocodingException(RuntimeException):
    """Raised for geocoding failures."""


class GeospatialException(RuntimeException):
    """Raised for geospatial query failures."""


class GraphException(RuntimeException):
    """Raised for graph structure errors."""


class GraphQLException(RuntimeException):
    """Raised for GraphQL query and mutation errors."""


class HashException(RuntimeException):
    """Raised for hashing operation failures."""


class HealthCheckException(RuntimeException):
    """Raised for health check failures."""


class HealthException(RuntimeException):
    """Raised for health check failures."""


class HttpClientException(RuntimeException):
    """Raised for HTTP client request failures."""


class IdempotencyException(RuntimeException):
    """Raised for idempotency key errors."""


class IdentityException(RuntimeException):
    """Raised for identity management errors."""


class ImageException(RuntimeException):
    """Raised for image processing errors."""


class ImmutableException(RuntimeException):
    """Raised for immutability violations."""


class ImportException(RuntimeException):
    """Raised for data import failures."""


class InfrastructureException(RuntimeException):
    """Raised for external system failures."""


class InstrumentationException(RuntimeException):
    """Raised for code instrumentation errors."""


class IntegrityException(RuntimeException):
    """Raised for data integrity violations."""


class InterceptorException(RuntimeException):
    """Raised for interceptor execution errors."""


class InterruptedException(RuntimeException):
    """Raised when an operation is interrupted."""


class InvalidStateException(RuntimeException):
    """Raised for invalid state errors."""


class InventoryException(RuntimeException):
    """Raised for inventory management errors."""


class InvoiceException(RuntimeException):
    """Raised for invoice generation failures."""


class JobFailedException(RuntimeException):
    """Raised for queue job failures."""


class JsonException(RuntimeException):
    """Raised for JSON operation errors."""


class LedgerException(RuntimeException):
    """Raised for ledger operation errors."""


class LoadBalancerException(RuntimeException):
    """Raised for load balancing errors."""


class LoadException(RuntimeException):
    """Raised for data loading errors."""


class LocalizationException(RuntimeException):
    """Raised for translation and locale errors."""


class LocationException(RuntimeException):
    """Raised for location service errors."""


class LockException(RuntimeException):
    """Raised for lock acquisition failures."""


class LogException(RuntimeException):
    """Raised for logging failures."""


class LoggerException(RuntimeException):
    """Raised for logger initialization failures."""


class MappingException(RuntimeException):
    """Raised for field mapping errors."""


class MetricException(RuntimeException):
    """Raised for metric collection errors."""


class MiddlewareException(RuntimeException):
    """Raised for middleware execution errors."""


class NegotiationException(RuntimeException):
    """Raised for negotiation process failures."""


class NetworkInterfaceException(RuntimeException):
    """Raised for network interface failures."""


class NoneException(RuntimeException):
    """Raised when unwrapping None/Nothing in Option/Maybe patterns."""


class NotFoundException(RuntimeException):
    """Raised for resource not found errors."""


class NotificationException(RuntimeException):
    """Raised for notification delivery failures."""


class NullPointerException(RuntimeException):
    """Raised when dereferencing null."""


class OAuthException(RuntimeException):
    """Raised for OAuth flow errors."""


class OptimizationException(RuntimeException):
    """Raised for optimization operation failures."""


class OrchestrationException(RuntimeException):
    """Raised for service orchestration failures."""


class PaginationException(RuntimeException):
    """Raised for pagination operation errors."""


class ParseException(RuntimeException):
    """Raised for parsing failures."""


class PayloadTooLargeException(RuntimeException):
    """Raised for request payload size violations."""


class PaymentException(RuntimeException):
    """Raised for payment processing errors."""


class PerformanceException(RuntimeException):
    """Raised for performance threshold violations."""


class PermissionDeniedException(RuntimeException):
    """Raised when filesystem or system permission is denied."""


class PipeException(RuntimeException):
    """Raised for pipe communication errors."""


class PluginException(RuntimeException):
    """Raised for plugin system errors."""


class PolicyException(RuntimeException):
    """Raised for policy enforcement errors."""


class PresenterException(RuntimeException):
    """Raised for presenter pattern errors."""


class PricingException(RuntimeException):
    """Raised for pricing calculation errors."""


class ProcessException(RuntimeException):
    """Raised for external process execution errors."""


class ProfileException(RuntimeException):
    """Raised for profiling operation errors."""


class ProfilingException(RuntimeException):
    """Raised for performance profiling failures."""


class ProjectionException(RuntimeException):
    """Raised for data projection failures."""


class ProtocolException(RuntimeException):
    """Raised for protocol violation errors."""


class PrototypeException(RuntimeException):
    """Raised for prototype cloning errors."""


class ProviderException(RuntimeException):
    """Raised for service provider errors."""


class ProxyException(RuntimeException):
    """Raised for proxy operation failures."""


class PublishingException(RuntimeException):
    """Raised for content publishing failures."""


class PushNotificationException(RuntimeException):
    """Raised for push notification errors."""


class QueueException(RuntimeException):
    """Raised for queue operation errors."""


class QuotaException(RuntimeException):
    """Raised for quota limit errors."""


class RateLimitException(RuntimeException):
    """Raised for rate limit violations."""


class ReconciliationException(RuntimeException):
    """Raised for reconciliation process errors."""


class RecurringException(RuntimeException):
    """Raised for recurring payment errors."""


class RecursionException(RuntimeException):
    """Raised when maximum recursion depth is exceeded."""


class ReflectionException(RuntimeException):
    """Raised for reflection operation errors."""


class RegistryException(RuntimeException):
    """Raised for registry operation failures."""


class RegulationException(RuntimeException):
    """Raised for regulatory requirement violations."""


class RenderException(RuntimeException):
    """Raised for template rendering failures."""


class ReportException(RuntimeException):
    """Raised for report generation failures."""


class ResourceException(RuntimeException):
    """Raised for resource allocation failures."""


class ResourceExhaustedException(RuntimeException):
    """Raised for resource exhaustion."""


class ResourceLeakException(RuntimeException):
    """Raised when resource leaks are detected."""


class RestoreException(RuntimeException):
    """Raised for data restoration errors."""


class RetryableException(RuntimeException):
    """Raised for explicitly retryable errors."""


class RevisionException(RuntimeException):
    """Raised for content revision errors."""


class RollbackException(RuntimeException):
    """Raised for rollback operation errors."""


class RollforwardException(RuntimeException):
    """Raised for rollforward operation errors."""


class RolloutException(RuntimeException):
    """Raised for feature rollout failures."""


class RotationException(RuntimeException):
    """Raised for secret rotation failures."""


class RoutingException(RuntimeException):
    """Raised for routing failures."""


class SagaException(RuntimeException):
    """Raised for saga pattern transaction errors."""


class SamplingException(RuntimeException):
    """Raised for metrics sampling failures."""


class ScheduleException(RuntimeException):
    """Raised for job scheduling failures."""


class SchemaException(RuntimeException):
    """Raised for database schema errors."""


class SearchException(RuntimeException):
    """Raised for search operation failures."""


class SecretException(RuntimeException):
    """Raised for secret retrieval failures."""


class SecurityException(RuntimeException):
    """Raised for security violations."""


class SegmentException(RuntimeException):
    """Raised for user segment errors."""


class SerializationException(RuntimeException):
    """Raised for serialization failures."""


class ServiceDiscoveryException(RuntimeException):
    """Raised for service discovery failures."""


class ServiceRegistryException(RuntimeException):
    """Raised for registry operation errors."""


class SessionException(RuntimeException):
    """Raised for session handling errors."""


class ShardingException(RuntimeException):
    """Raised for sharding operation errors."""


class SignalException(RuntimeException):
    """Raised for signal handling failures."""


class SignatureException(RuntimeException):
    """Raised for digital signature verification failures."""


class SlackException(RuntimeException):
    """Raised for Slack integration failures."""


class SmsException(RuntimeException):
    """Raised for SMS delivery failures."""


class SnapshotException(RuntimeException):
    """Raised for snapshot operation failures."""


class SortException(RuntimeException):
    """Raised for sorting operation errors."""


class SslException(RuntimeException):
    """Raised for SSL/TLS protocol errors."""


class StateException(RuntimeException):
    """Raised for state management issues."""


class StopIterationException(RuntimeException):
    """Raised when an iterator is exhausted."""


class StreamException(RuntimeException):
    """Raised for stream operation failures."""


class StreamingException(RuntimeException):
    """Raised for real-time streaming errors."""


class SubscriptionException(RuntimeException):
    """Raised for subscription management errors."""


class SyncException(RuntimeException):
    """Raised for data synchronization errors."""


class TargetingException(RuntimeException):
    """Raised for feature targeting errors."""


class TemplateException(RuntimeException):
    """Raised for template compilation errors."""


class TemporaryException(RuntimeException):
    """Raised for temporary/transient failures."""


class TenantException(RuntimeException):
    """Raised for multi-tenant operation errors."""


class TestException(RuntimeException):
    """Raised for test execution failures."""

    __test__ = False


class ThrottleException(RuntimeException):
    """Raised for throttling operation errors."""


class TimeoutException(RuntimeException):
    """Raised for timeout errors."""


class TimezoneException(RuntimeException):
    """Raised for timezone conversion errors."""


class TracingException(RuntimeException):
    """Raised for distributed tracing errors."""


class TransformException(RuntimeException):
    """Raised for data transformation errors."""


class TransformerException(RuntimeException):
    """Raised for data transformation errors."""


class TwoFactorException(RuntimeException):
    """Raised for 2FA operation failures."""


class TypeException(RuntimeException, TypeError):
    """Raised for type mismatches."""


class UnauthorizedException(RuntimeException):
    """Raised for authentication failures."""


class UnsupportedMediaTypeException(RuntimeException):
    """Raised for unsupported media types."""


class UnsupportedOperationException(RuntimeException, NotImplementedError):
    """Raised for unsupported operations."""


class ValidationException(RuntimeException):
    """Raised for input validation errors."""


class VaultException(RuntimeException):
    """Raised for secret vault errors."""


class VideoException(RuntimeException):
    """Raised for video processing errors."""


class ViewException(RuntimeException):
    """Raised for view rendering failures."""


class WebSocketException(RuntimeException):
    """Raised for WebSocket connection and message errors."""


class WebhookException(RuntimeException):
    """Raised for webhook delivery failures."""


class WindowException(RuntimeException):
    """Raised for rate window errors."""


class WorkerException(RuntimeException):
    """Raised for worker process failures."""


class WorkflowException(RuntimeException):
    """Raised for workflow execution errors."""


class XmlException(RuntimeException):
    """Raised for XML parsing failures."""


class YamlException(RuntimeException):
    """Raised for YAML parsing errors."""


# =============================================================================
# Specialisations of the categories above
# =============================================================================


class GroupingException(AggregationException):
    """Raised for data grouping errors."""


class ReduceException(AggregationException):
    """Raised for reduce operation failures."""


class ZeroDivisionException(ArithmeticException, ZeroDivisionError):
    """Raised when dividing by zero."""


class BulkException(BatchException):
    """Raised for bulk operation errors."""


class ChunkException(BatchException):
    """Raised for chunk processing failures."""


class PresenceException(BroadcastException):
    """Raised for presence channel errors."""


class DeadlockException(ConcurrencyException):
    """Raised for deadlock detection."""


class RaceConditionException(ConcurrencyException):
    """Raised for race condition detection."""


class CommandException(ConsoleException):
    """Raised for command execution errors."""


class InputException(ConsoleException):
    """Raised for console input validation errors."""


class BindingException(ContainerException):
    """Raised for service binding and resolution failures."""


class CircularDependencyException(ContainerException):
    """Raised for circular dependency detection."""


class CoercionException(ConversionException):
    """Raised for type coercion errors."""


class TransformationException(ConversionException):
    """Raised for data transformation failures."""


class PackageException(DependencyException):
    """Raised for package installation errors."""


class VersionException(DependencyException):
    """Raised for version conflict errors."""


class UnicodeException(EncodingException):
    """Raised for Unicode character encoding errors."""


class ListenerException(EventException):
    """Raised for event listener errors."""


class DirectoryException(FilesystemException):
    """Raised for directory operation failures."""


class SymlinkException(FilesystemException):
    """Raised for symbolic link errors."""


class CoordinateException(GeospatialException):
    """Raised for coordinate validation errors."""


class DistanceException(GeospatialException):
    """Raised for distance calculation errors."""


class TreeException(GraphException):
    """Raised for tree traversal failures."""


class GraphQLValidationException(GraphQLException):
    """Raised for GraphQL schema validation errors."""


class ResolverException(GraphQLException):
    """Raised for GraphQL resolver failures."""


class LivenessException(HealthException):
    """Raised for liveness probe failures."""


class ReadinessException(HealthException):
    """Raised for readiness probe errors."""


class DeduplicationException(IdempotencyException):
    """Raised for duplicate detection failures."""


class ReplayException(IdempotencyException):
    """Raised for replay protection errors."""


class ApiException(InfrastructureException):
    """Raised for generic API errors."""


class CacheException(InfrastructureException):
    """Raised for cache operation failures."""


class ExternalServiceException(InfrastructureException):
    """Raised for third-party service failures."""


class FileException(InfrastructureException):
    """Raised for file operation errors."""


class MessageException(InfrastructureException):
    """Raised for message queue and pub/sub errors."""


class MigrationException(InfrastructureException):
    """Raised for database migration failures."""


class NetworkException(InfrastructureException):
    """Raised for network-related errors."""


class StorageException(InfrastructureException):
    """Raised for cloud storage failures."""


class DelayedException(JobFailedException):
    """Raised for delayed job errors."""


class AuditTrailException(LedgerException):
    """Raised for audit trail recording failures."""


class ImmutabilityException(LedgerException):
    """Raised for immutability violation errors."""


class TranslationException(LocalizationException):
    """Raised for missing translation keys."""


class MutexException(LockException):
    """Raised for mutex operation failures."""


class SemaphoreException(LockException):
    """Raised for semaphore operation errors."""


class FormatterException(LoggerException):
    """Raised for log formatting errors."""


class HandlerException(LoggerException):
    """Raised for log handler errors."""


class AgreementException(NegotiationException):
    """Raised for agreement validation errors."""


class AlertException(NotificationException):
    """Raised for alert triggering errors."""


class DeliveryException(NotificationException):
    """Raised for message delivery failures."""


class EmailException(NotificationException):
    """Raised for email sending errors."""


class CalibrationException(OptimizationException):
    """Raised for system calibration failures."""


class TuningException(OptimizationException):
    """Raised for performance tuning errors."""


class RefundException(PaymentException):
    """Raised for refund processing failures."""


class StripeException(PaymentException):
    """Raised for Stripe-specific errors."""


class ExtensionException(PluginException):
    """Raised for extension system failures."""


class ModuleException(PluginException):
    """Raised for modular system errors."""


class RuleException(PolicyException):
    """Raised for business rule violations."""


class ViewModelException(PresenterException):
    """Raised for ViewModel creation failures."""


class BaselineException(ProfileException):
    """Raised for baseline comparison errors."""


class SampleException(ProfileException):
    """Raised for sampling operation failures."""


class MaterializedViewException(ProjectionException):
    """Raised for materialized view errors."""


class HttpProtocolException(ProtocolException):
    """Raised for HTTP protocol violations."""


class BalanceException(ReconciliationException):
    """Raised for balance calculation errors."""


class SettlementException(ReconciliationException):
    """Raised for settlement operation failures."""


class IntrospectionException(ReflectionException):
    """Raised for object introspection failures."""


class MetadataException(ReflectionException):
    """Raised for metadata extraction errors."""


class DiscoveryException(RegistryException):
    """Raised for service discovery errors."""


class LookupException(RegistryException):
    """Raised for lookup operation failures."""


class LayoutException(RenderException):
    """Raised for layout composition errors."""


class PartialException(RenderException):
    """Raised for template partial loading errors."""


class LeaseException(ResourceException):
    """Raised for resource lease errors."""


class PoolException(ResourceException):
    """Raised for resource pool management errors."""


class MemoryException(ResourceExhaustedException):
    """Raised for memory-specific errors."""


class CronException(ScheduleException):
    """Raised for cron expression errors."""


class TimerException(ScheduleException):
    """Raised for timer operation failures."""


class IndexException(SearchException):
    """Raised for index operation errors."""


class QueryException(SearchException):
    """Raised for query parsing failures."""


class MarshallingException(SerializationException):
    """Raised for marshalling operation errors."""


class UnmarshallingException(SerializationException):
    """Raised for unmarshalling failures."""


class PartitionException(ShardingException):
    """Raised for partition management failures."""


class RoutingKeyException(ShardingException):
    """Raised for routing key calculation errors."""


class ConsumerException(StreamingException):
    """Raised for stream consumer failures."""


class ProducerException(StreamingException):
    """Raised for stream producer errors."""


class ConflictResolutionException(SyncException):
    """Raised for conflict resolution failures."""


class ReplicationException(SyncException):
    """Raised for data replication failures."""


class IsolationException(TenantException):
    """Raised for tenant isolation failures."""


class TenantQuotaException(TenantException):
    """Raised for tenant quota violations."""


class AssertionException(TestException):
    """Raised for test assertion violations."""


class FixtureException(TestException):
    """Raised for test fixture loading errors."""


class MockException(TestException):
    """Raised for mocking and stubbing errors."""


class BackpressureException(ThrottleException):
    """Raised for backpressure handling failures."""


class OverflowException(BackpressureException, OverflowError):
    """Raised when adding an element to a full buffer or queue exceeds its limit."""


class SpanException(TracingException):
    """Raised for distributed tracing span errors."""


class FormatException(ValidationException):
    """Raised for invalid data formats."""


# =============================================================================
# Second-level specialisations
# =============================================================================


class ConsentException(AgreementException):
    """Raised for consent verification failures."""


class PermissionException(FileException):
    """Raised for file permission errors."""


class CrossTenantException(IsolationException):
    """Raised for cross-tenant access errors."""


class ViewRefreshException(MaterializedViewException):
    """Raised for view refresh operation failures."""


class ConstraintException(RuleException):
    """Raised for constraint validation failures."""


class NodeException(TreeException):
    """Raised for node operation errors."""


class BackwardCompatibilityException(VersionException):
    """Raised for breaking changes."""


__all__ = [
    "AccessibilityException",
    "AdapterException",
    "AggregationException",
    "AnalyticsException",
    "AnnotationException",
    "ArchiveException",
    "ArithmeticException",
    "AssetException",
    "AttributeException",
    "AuditException",
    "BackupException",
    "BadRequestException",
    "BatchException",
    "BenchmarkException",
    "BillingException",
    "BiometricException",
    "BroadcastException",
    "BrokenPipeException",
    "BufferException",
    "BuilderException",
    "BulkheadException",
    "BurstException",
    "BusinessRuleException",
    "CanaryException",
    "CastException",
    "CertificateException",
    "ChannelException",
    "CheckpointException",
    "ChecksumException",
    "CircuitBreakerException",
    "CloudStorageException",
    "CompensationException",
    "ComplianceException",
    "ComponentException",
    "CompressionException",
    "ConcurrencyException",
    "ConcurrentModificationException",
    "ConfigurationException",
    "ConflictException",
    "ConnectionException",
    "ConsoleException",
    "ContainerException",
    "ContentDeliveryNetworkException",
    "ConversionException",
    "CookieException",
    "CorruptedDataException",
    "CorruptionException",
    "CorsException",
    "CpuException",
    "CsvException",
    "CurrencyException",
    "DashboardException",
    "DataIntegrityException",
    "DataTableException",
    "DebugException",
    "DecoratorException",
    "DelegationException",
    "DependencyException",
    "DeploymentException",
    "DeprecatedException",
    "DiscountException",
    "DiskException",
    "DnsException",
    "DraftException",
    "DriverException",
    "EncodingException",
    "EncryptionException",
    "EndOfFileException",
    "EventException",
    "ExperimentException",
    "ExportException",
    "ExtractException",
    "FactoryException",
    "FallbackException",
    "FeatureFlagException",
    "FilesystemException",
    "FilterException",
    "ForbiddenException",
    "GatewayException",
    "GeocodingException",
    "GeospatialException",
    "GraphException",
    "GraphQLException",
    "HashException",
    "HealthCheckException",
    "HealthException",
    "HttpClientException",
    "IdempotencyException",
    "IdentityException",
    "ImageException",
    "ImmutableException",
    "ImportException",
    "InfrastructureException",
    "InstrumentationException",
    "IntegrityException",
    "InterceptorException",
    "InterruptedException",
    "InvalidStateException",
    "InventoryException",
    "InvoiceException",
    "JobFailedException",
    "JsonException",
    "LedgerException",
    "LoadBalancerException",
    "LoadException",
    "LocalizationException",
    "LocationException",
    "LockException",
    "LogException",
    "LoggerException",
    "MappingException",
    "MetricException",
    "MiddlewareException",
    "NegotiationException",
    "NetworkInterfaceException",
    "NoneException",
    "NotFoundException",
    "NotificationException",
    "NullPointerException",
    "OAuthException",
    "OptimizationException",
    "OrchestrationException",
    "PaginationException",
    "ParseException",
    "PayloadTooLargeException",
    "PaymentException",
    "PerformanceException",
    "PermissionDeniedException",
    "PipeException",
    "PluginException",
    "PolicyException",
    "PresenterException",
    "PricingException",
    "ProcessException",
    "ProfileException",
    "ProfilingException",
    "ProjectionException",
    "ProtocolException",
    "PrototypeException",
    "ProviderException",
    "ProxyException",
    "PublishingException",
    "PushNotificationException",
    "QueueException",
    "QuotaException",
    "RateLimitException",
    "ReconciliationException",
    "RecurringException",
    "RecursionException",
    "ReflectionException",
    "RegistryException",
    "RegulationException",
    "RenderException",
    "ReportException",
    "ResourceException",
    "ResourceExhaustedException",
    "ResourceLeakException",
    "RestoreException",
    "RetryableException",
    "RevisionException",
    "RollbackException",
    "RollforwardException",
    "RolloutException",
    "RotationException",
    "RoutingException",
    "SagaException",
    "SamplingException",
    "ScheduleException",
    "SchemaException",
    "SearchException",
    "SecretException",
    "SecurityException",
    "SegmentException",
    "SerializationException",
    "ServiceDiscoveryException",
    "ServiceRegistryException",
    "SessionException",
    "ShardingException",
    "SignalException",
    "SignatureException",
    "SlackException",
    "SmsException",
    "SnapshotException",
    "SortException",
    "SslException",
    "StateException",
    "StopIterationException",
    "StreamException",
    "StreamingException",
    "SubscriptionException",
    "SyncException",
    "TargetingException",
    "TemplateException",
    "TemporaryException",
    "TenantException",
    "TestException",
    "ThrottleException",
    "TimeoutException",
    "TimezoneException",
    "TracingException",
    "TransformException",
    "TransformerException",
    "TwoFactorException",
    "TypeException",
    "UnauthorizedException",
    "UnsupportedMediaTypeException",
    "UnsupportedOperationException",
    "ValidationException",
    "VaultException",
    "VideoException",
    "ViewException",
    "WebSocketException",
    "WebhookException",
    "WindowException",
    "WorkerException",
    "WorkflowException",
    "XmlException",
    "YamlException",
    "GroupingException",
    "ReduceException",
    "ZeroDivisionException",
    "BulkException",
    "ChunkException",
    "PresenceException",
    "DeadlockException",
    "RaceConditionException",
    "CommandException",
    "InputException",
    "BindingException",
    "CircularDependencyException",
    "CoercionException",
    "TransformationException",
    "PackageException",
    "VersionException",
    "UnicodeException",
    "ListenerException",
    "DirectoryException",
    "SymlinkException",
    "CoordinateException",
    "DistanceException",
    "TreeException",
    "GraphQLValidationException",
    "ResolverException",
    "LivenessException",
    "ReadinessException",
    "DeduplicationException",
    "ReplayException",
    "ApiException",
    "CacheException",
    "ExternalServiceException",
    "FileException",
    "MessageException",
    "MigrationException",
    "NetworkException",
    "StorageException",
    "DelayedException",
    "AuditTrailException",
    "ImmutabilityException",
    "TranslationException",
    "MutexException",
    "SemaphoreException",
    "FormatterException",
    "HandlerException",
    "AgreementException",
    "AlertException",
    "DeliveryException",
    "EmailException",
    "CalibrationException",
    "TuningException",
    "RefundException",
    "StripeException",
    "ExtensionException",
    "ModuleException",
    "RuleException",
    "ViewModelException",
    "BaselineException",
    "SampleException",
    "MaterializedViewException",
    "HttpProtocolException",
    "BalanceException",
    "SettlementException",
    "IntrospectionException",
    "MetadataException",
    "DiscoveryException",
    "LookupException",
    "LayoutException",
    "PartialException",
    "LeaseException",
    "PoolException",
    "MemoryException",
    "CronException",
    "TimerException",
    "IndexException",
    "QueryException",
    "MarshallingException",
    "UnmarshallingException",
    "PartitionException",
    "RoutingKeyException",
    "ConsumerException",
    "ProducerException",
    "ConflictResolutionException",
    "ReplicationException",
    "IsolationException",
    "TenantQuotaException",
    "AssertionException",
    "FixtureException",
    "MockException",
    "BackpressureException",
    "OverflowException",
    "SpanException",
    "FormatException",
    "ConsentException",
    "PermissionException",
    "CrossTenantException",
    "ViewRefreshException",
    "ConstraintException",
    "NodeException",
    "BackwardCompatibilityException",
]
