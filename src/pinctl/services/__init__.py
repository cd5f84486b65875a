"""Service layer — PIN operations returning ServiceResult.

Services convert domain errors into structured results so that every
interface (CLI today, others later) consumes one contract.
"""
