''' Common functions shared by the calculators and user interfaces '''
