# -*- coding: utf-8 -*-

"""
Copy DynamoDB table schemas from one AWS account to another, and prepare the
Glue jobs that load the exported data into the copies.
"""

__version__ = "0.1.1"
